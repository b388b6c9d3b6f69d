# src/cleanconfig/rules/file.py
"""
Regras sobre caminhos do sistema de arquivos.

Aceitam `str` ou `Path`. As verificações consultam o disco no momento da
validação; o resultado não é estável entre chamadas se o disco mudar.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from ..core.context import PropertyContext
from ..core.validation.result import ValidationResult
from ..core.validation.rule import ValidationRule
from .base import failure, rule


def exists() -> ValidationRule:
    return rule(lambda v: Path(v).exists(), "Path does not exist")


def file_exists() -> ValidationRule:
    return exists()


def directory_exists() -> ValidationRule:
    def _check(name: str, value: Any, context: PropertyContext) -> ValidationResult:
        if value is None:
            return ValidationResult.success()
        path = Path(value)
        if not path.exists():
            return failure(name, "Directory does not exist", actual_value=str(value))
        if not path.is_dir():
            return failure(name, "Path exists but is not a directory", actual_value=str(value))
        return ValidationResult.success()

    return ValidationRule(_check, "directory_exists")


def readable() -> ValidationRule:
    return rule(lambda v: os.access(v, os.R_OK), "File is not readable")


def writable() -> ValidationRule:
    return rule(lambda v: os.access(v, os.W_OK), "File is not writable")


def executable() -> ValidationRule:
    return rule(lambda v: os.access(v, os.X_OK), "File is not executable")


def has_extension(extension: str) -> ValidationRule:
    ext = extension if extension.startswith(".") else f".{extension}"
    return rule(lambda v: str(v).endswith(ext), f"File must have extension: {ext}")
