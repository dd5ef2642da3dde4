from enum import Enum
from typing import Callable, Dict, List, Optional

from . import api
from .client import ShareClient
from .config import Config
from .downloads import ensure_download_dir, save_download
from .errors import MissingCredentialError, ShareError, ValidationError
from .file_manager import FileAction, FileManagerView
from .models import FileRecord
from .presentation import Terminal
from .session_store import CredentialStore
from .uploads import validate_upload_path
from .utils import get_logger


class Screen(Enum):
    MAIN_MENU = "main_menu"
    ACCESS_ENDPOINT = "access_endpoint"
    CREATE_ENDPOINT = "create_endpoint"
    FILE_MANAGER = "file_manager"
    UPLOAD = "upload"
    DOWNLOAD = "download"
    EXIT = "exit"


MAIN_MENU_OPTIONS = ["Access Endpoint", "Create Endpoint", "Exit"]


class Menu:
    """Interactive screens driven by one dispatch loop.

    Every handler shows its screen, makes at most one logical service call and
    returns the screen to show next. Endpoint name, password and the current
    file list only live here, for the length of the process.
    """

    def __init__(
        self,
        config: Config,
        client: ShareClient,
        store: CredentialStore,
        terminal: Optional[Terminal] = None,
    ) -> None:
        self.config = config
        self.client = client
        self.store = store
        self.terminal = terminal or Terminal()
        self.view = FileManagerView(self.terminal)
        self.logger = get_logger("cshare", debug=config.debug)
        self.endpoint_name: Optional[str] = None
        self.password: Optional[str] = None
        self.files: List[FileRecord] = []
        self._handlers: Dict[Screen, Callable[[], Screen]] = {
            Screen.MAIN_MENU: self.main_menu,
            Screen.ACCESS_ENDPOINT: self.access_endpoint,
            Screen.CREATE_ENDPOINT: self.create_endpoint,
            Screen.FILE_MANAGER: self.file_manager,
            Screen.UPLOAD: self.upload,
            Screen.DOWNLOAD: self.download,
        }

    def run(self, start: Screen = Screen.MAIN_MENU) -> None:
        screen = start
        while screen is not Screen.EXIT:
            self.logger.debug("screen=%s", screen.value)
            try:
                screen = self._handlers[screen]()
            except (KeyboardInterrupt, EOFError):
                self.terminal.line()
                break
            except Exception as exc:
                self.logger.debug("Unhandled error on %s", screen.value, exc_info=True)
                self.terminal.error(str(exc) or exc.__class__.__name__)
                self.terminal.pause(self.config.error_delay)
                screen = Screen.MAIN_MENU

    def _fail(self, exc: ShareError, next_screen: Screen) -> Screen:
        self.terminal.error(exc.message)
        self.terminal.pause(self.config.error_delay)
        return next_screen

    def _ask_credentials(self, name_prompt: str, password_prompt: str):
        name = self.terminal.ask(name_prompt)
        password = self.terminal.ask_password(password_prompt)
        if not name:
            raise ValidationError("Endpoint name is required")
        if not password:
            raise ValidationError("Password is required")
        return name, password

    def main_menu(self) -> Screen:
        self.terminal.header()
        choice = self.terminal.choose("Select an option", MAIN_MENU_OPTIONS)
        return [Screen.ACCESS_ENDPOINT, Screen.CREATE_ENDPOINT, Screen.EXIT][choice]

    def access_endpoint(self) -> Screen:
        self.terminal.header()
        try:
            name, password = self._ask_credentials("Endpoint name", "Password")
            self.terminal.info("\nAccessing endpoint...")
            access = api.access_endpoint(self.client, name, password)
        except ShareError as exc:
            return self._fail(exc, Screen.MAIN_MENU)
        self.store.save(access.auth_token)
        self.endpoint_name = name
        self.password = password
        self.files = access.files
        self.logger.debug("Accessed endpoint %s (%d files)", name, len(access.files))
        return Screen.FILE_MANAGER

    def create_endpoint(self) -> Screen:
        self.terminal.header()
        try:
            name, password = self._ask_credentials("New endpoint name", "Set password")
            self.terminal.info("\nCreating endpoint...")
            token = api.create_endpoint(self.client, name, password)
        except ShareError as exc:
            return self._fail(exc, Screen.MAIN_MENU)
        self.store.save(token)
        self.terminal.success("\nEndpoint created successfully!")
        self.terminal.pause(self.config.error_delay)
        return Screen.MAIN_MENU

    def file_manager(self) -> Screen:
        self.view.render(self.endpoint_name or "", self.files)
        action = self.view.prompt_action()
        if action is FileAction.UPLOAD:
            return Screen.UPLOAD
        if action is FileAction.DOWNLOAD:
            if self.files:
                return Screen.DOWNLOAD
            self.terminal.info("\nNo files to download")
            self.terminal.pause(self.config.error_delay)
            return Screen.FILE_MANAGER
        return Screen.MAIN_MENU

    def _refresh_files(self) -> None:
        access = api.access_endpoint(self.client, self.endpoint_name, self.password)
        self.store.save(access.auth_token)
        self.files = access.files

    def upload(self) -> Screen:
        raw = self.terminal.ask("Enter file path or drag & drop file here")
        try:
            path = validate_upload_path(raw, max_bytes=self.config.max_upload_bytes)
            token = self.store.load()
        except (ValidationError, MissingCredentialError) as exc:
            return self._fail(exc, Screen.FILE_MANAGER)
        try:
            self.terminal.info("\nUploading file...")
            api.upload_file(self.client, self.endpoint_name, token, path, max_bytes=self.config.max_upload_bytes)
            self.terminal.success("\nFile uploaded successfully!")
            self.terminal.pause(self.config.error_delay)
            self._refresh_files()
        except ShareError as exc:
            self.files = []
            return self._fail(exc, Screen.FILE_MANAGER)
        except OSError as exc:
            self.terminal.error(f"Could not read {path}: {exc}")
            self.terminal.pause(self.config.error_delay)
            return Screen.FILE_MANAGER
        return Screen.FILE_MANAGER

    def download(self) -> Screen:
        record = self.view.prompt_file(self.files)
        try:
            token = self.store.load()
            self.terminal.info("\nDownloading file...")
            content = api.download_file(self.client, record.id, token)
        except ShareError as exc:
            return self._fail(exc, Screen.FILE_MANAGER)
        try:
            target = save_download(self.config.download_dir, record.file_name, content)
        except (OSError, ValueError) as exc:
            self.terminal.error(f"Could not save {record.file_name}: {exc}")
            self.terminal.pause(self.config.error_delay)
            return Screen.FILE_MANAGER
        self.terminal.success(f"\nFile downloaded to: {target}")
        self.terminal.pause(self.config.error_delay)
        try:
            self._refresh_files()
        except ShareError as exc:
            self.files = []
            return self._fail(exc, Screen.FILE_MANAGER)
        return Screen.FILE_MANAGER


def main() -> int:
    config = Config()
    logger = get_logger("cshare", debug=config.debug)
    terminal = Terminal()
    try:
        ensure_download_dir(config.download_dir)
    except OSError as exc:
        terminal.error(f"Error creating downloads directory: {exc}")
        return 1
    logger.debug("Downloads go to %s", config.download_dir)

    store = CredentialStore(config.credential_path)
    with ShareClient(
        base_url=config.base_url,
        timeout=config.timeout,
        http_log_path=config.http_log_path,
        debug=config.debug,
    ) as client:
        Menu(config, client, store, terminal).run()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
