import locale
from typing_extensions import override

from morpheus_shell.texts.system import MOTD_PATH
from morpheus_shell.vfs.nodes import Directory, File, Node
from morpheus_shell.vfs.path_utils import format_path, normalize, resolve

from .base import CommandContext, CommandError, CommandResult, CommandSet

FileSystemCommandNames = ["ls", "cd", "pwd", "cat", "motd"]


def _display_name(node: Node) -> str:
    match node:
        case Directory(name=name):
            return f"{name}/"
        case File(name=name):
            return name


class FileSystemCommands(CommandSet):
    """
    Read-only navigation of the virtual tree.
    `cd` is the only command here that changes session state, and only on success.
    """

    @override
    def get_commands(self) -> list[str]:
        return FileSystemCommandNames

    @override
    def execute(self, command: str, context: CommandContext) -> CommandResult:
        match command:
            case "ls":
                return self._ls_handler(context)
            case "cd":
                return self._cd_handler(context)
            case "pwd":
                return self._pwd_handler(context)
            case "cat":
                return self._cat_handler(context)
            case "motd":
                return self._motd_handler(context)
            case _:
                raise CommandError(f"{command}: command not recognized")

    def _ls_handler(self, context: CommandContext) -> CommandResult:
        if context.args:
            target = context.args[0]
            path = normalize(target, context.current_path)
        else:
            path = context.current_path
            target = format_path(path)

        match resolve(path, context.root):
            case None:
                raise CommandError(f"ls: no such file or directory: {target}")
            case File():
                raise CommandError(f"ls: not a directory: {target}")
            case Directory(children=children):
                names = sorted((_display_name(child) for child in children), key=locale.strxfrm)

        if not names:
            return CommandResult()
        return CommandResult(lines=["  ".join(names)])

    def _cd_handler(self, context: CommandContext) -> CommandResult:
        if not context.args:
            raise CommandError("cd: target path required")

        target = context.args[0]
        path = normalize(target, context.current_path)
        match resolve(path, context.root):
            case None:
                raise CommandError(f"cd: no such file or directory: {target}")
            case File():
                raise CommandError(f"cd: not a directory: {target}")
            case Directory():
                return CommandResult(
                    lines=[f"Directory changed to {format_path(path)}"],
                    kind="system",
                    new_path=path,
                )

    def _pwd_handler(self, context: CommandContext) -> CommandResult:
        return CommandResult(lines=[format_path(context.current_path)])

    def _cat_handler(self, context: CommandContext) -> CommandResult:
        if not context.args:
            raise CommandError("cat: file path required")
        return self._read_file(context.args[0], context)

    def _motd_handler(self, context: CommandContext) -> CommandResult:
        return self._read_file(MOTD_PATH, context)

    def _read_file(self, target: str, context: CommandContext) -> CommandResult:
        path = normalize(target, context.current_path)
        match resolve(path, context.root):
            case None:
                raise CommandError(f"cat: {target}: no such file or directory")
            case Directory():
                raise CommandError(f"cat: {target}: is a directory")
            case File(content=content):
                return CommandResult(lines=content.splitlines())
