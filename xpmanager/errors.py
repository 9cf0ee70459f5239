"""Exit codes and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes used when an operation fails."""

    # File
    FILE_NOT_FOUND = 50
    FILE_CREATE = 51
    FILE_OPEN = 52
    FILE_READ = 53
    FILE_WRITE = 54
    FILE_SEEK = 55
    FILE_FLUSH = 56
    FILE_DELETE = 57
    FILE_ALREADY_ENCRYPTED = 58
    FILE_NOT_ENCRYPTED = 59

    # Directory
    DIR_NOT_FOUND = 65
    DIR_CREATE = 66
    DIR_UNSUPPORTED = 67
    CAN_NOT_GET_DIR_DATA = 68
    SYSTEM_DATA_DIR_NOT_FOUND = 69
    CAN_NOT_GET_FILE_OR_DIR_TYPE = 70

    # JSON
    CAN_NOT_GET_JSON_OBJECT = 75
    INVALID_JSON = 76

    # Encryption and decryption
    INVALID_KEY = 80
    INVALID_ENCRYPTION_DATA = 81

    # Database
    DB_CONNECTION = 85
    DB_INSERT = 86
    DB_CREATE_TABLE = 87
    PM_DATABASE_NOT_FOUND = 89
    PM_DATABASE_EMPTY = 90
    LM_DATABASE_NOT_FOUND = 91
    LOG_NOT_FOUND = 92
    LM_DATABASE_ENCRYPTED = 93

    # Others
    INPUT = 95
    MISSING_ARG = 96
    CONFIRMATION_NOT_MATCH = 97
    SAMPLE_CONTAIN_SPACE = 98


class XpmError(Exception):
    """An operation failed; ``code`` is the exit code the process should use."""

    def __init__(self, message: str, code: ExitCode | int) -> None:
        super().__init__(message)
        self.message = message
        self.code = ExitCode(code)