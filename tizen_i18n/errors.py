from __future__ import annotations


class TizenI18nError(Exception):
    pass


class DirectoryError(TizenI18nError, NotADirectoryError):
    pass


class EmptyOutputError(TizenI18nError, ValueError):
    pass


class NoLanguagesFoundError(TizenI18nError, ValueError):
    pass


class StringsFileError(TizenI18nError, ValueError):
    def __init__(self, path: object, line_no: int, message: str) -> None:
        super().__init__(f"{path}:{line_no}: {message}")
        self.path = path
        self.line_no = line_no
