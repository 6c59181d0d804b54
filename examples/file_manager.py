from clade import Application, Command, Configuration
from clade.console import console
from clade.utils import setup_logging

setup_logging()


class ManagerConfiguration(Configuration):
    root: str = "."
    dry_run: bool = False


def add_files(command: Command) -> int:
    options = command.parent.get_options(unprovided=True)
    for name in command.arguments:
        console.print(f"[clade.command]add[/] {name} (force={options['force']})")
    return 0


def remove_files(command: Command) -> int:
    if not command.arguments:
        console.print("[clade.error]❌ Nothing to remove.[/]")
        return 1
    for name in command.arguments:
        console.print(f"[clade.command]remove[/] {name}")
    return 0


def show_status(command: Command) -> None:
    config = ManagerConfiguration.load(command.options["config"].value or None)
    console.print(f"root={config.root} dry_run={config.dry_run}")


def configure(app: Application) -> None:
    app.option("verbose", help="Print more output.")

    status = app.command("status", description="Show the configuration.", action=show_status)
    status.option("config", ["c", "config"], type=str, meta="FILE", help="Configuration file.")

    manage = app.command("manage", description="Manage files.")
    manage.option("force", ["f", "force"], help="Overwrite existing files.")
    manage.option("depth", ["d", "depth"], type=int, default=1, validator=[1, 2, 3])
    manage.command("add", description="Add files.", action=add_files)
    manage.command("remove", description="Remove files.", action=remove_files)


if __name__ == "__main__":
    Application.create(
        configure,
        name="files",
        description="A small file manager.",
        version="1.0.0",
    )
