from enum import Enum
from typing import List

from endpoints import ENDPOINTS
from .models import FileRecord
from .presentation import Terminal


class FileAction(Enum):
    UPLOAD = "Upload File"
    DOWNLOAD = "Download File"
    BACK = "Back to Menu"


class FileManagerView:
    """Lists an endpoint's files and asks what to do with them.

    The view never changes a file list itself; the caller re-fetches it from
    the service after every upload or download.
    """

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal

    def render(self, endpoint_name: str, files: List[FileRecord]) -> None:
        route = ENDPOINTS["access"]
        self.terminal.header()
        self.terminal.info(f"\nEndpoint: {endpoint_name}")
        self.terminal.endpoint(f"{route['method']} {route['path'].format(name=endpoint_name)}\n")
        if not files:
            self.terminal.line("No files found\n")
            return
        for index, record in enumerate(files, start=1):
            self.terminal.line(f"{index}. {record.file_name}")
        self.terminal.line()

    def prompt_action(self) -> FileAction:
        actions = list(FileAction)
        index = self.terminal.choose("Choose action", [action.value for action in actions])
        return actions[index]

    def prompt_file(self, files: List[FileRecord]) -> FileRecord:
        index = self.terminal.choose("Select file to download", [record.file_name for record in files])
        return files[index]
