import os
import logging
from dataclasses import dataclass

from tinywiki.exceptions import PageNotFound

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".txt"
DIR_MODE = 0o700
FILE_MODE = 0o600


@dataclass
class Page:
    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class PageStore:
    def __init__(self, data_dir: str = "data"):
        """
        Flat file storage, one `<title>.txt` file per page.
        The title is used as-is for the filename, callers must validate it.
        No locking is done, concurrent saves of the same title are last write wins.
        Args:
            data_dir (str): Directory holding the page files. Created on first save.
        """
        self.data_dir = data_dir

    def path_for(self, title: str) -> str:
        return os.path.join(self.data_dir, title + PAGE_SUFFIX)

    def save(self, page: Page) -> None:
        """
        Writes the page body, replacing any previous content for the title.
        Raises:
            OSError: If the directory cannot be created or the file cannot be written.
        """
        os.makedirs(self.data_dir, mode=DIR_MODE, exist_ok=True)
        path = self.path_for(page.title)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(page.body)
        logger.debug(f"Wrote {len(page.body)} bytes to {path}")

    def load(self, title: str) -> Page:
        """
        Reads a page in full.
        Raises:
            PageNotFound: If the file is missing or unreadable.
        """
        path = self.path_for(title)
        try:
            with open(path, "rb") as f:
                body = f.read()
        except OSError as e:
            raise PageNotFound(title, e.strerror or str(e)) from e
        return Page(title=title, body=body)
