import functools
import os
import pathlib
import sys

from cqlgen import data

__all__ = (
    "get_config_path",
    "get_log_folder",
)

HOME_ENV_VAR = "CQLGEN_HOME"


@functools.lru_cache
def _root_dir() -> pathlib.Path | data.Error:
    if home := os.environ.get(HOME_ENV_VAR):
        path = pathlib.Path(home)
        if not path.is_dir():
            return data.Error.new(f"{HOME_ENV_VAR} points to {home}, which is not a directory.")
        return path

    if getattr(sys, "frozen", False):
        return pathlib.Path(sys.executable).parent

    try:
        return next(p for p in pathlib.Path(__file__).parents if (p / "cqlgen").is_dir())
    except StopIteration:
        return data.Error.new(f"Could not locate the cqlgen root folder from {__file__}.")


def get_config_path(override: pathlib.Path | None = None, /) -> pathlib.Path | data.Error:
    if override is not None:
        return override

    root = _root_dir()
    if isinstance(root, data.Error):
        return root

    return root / "assets" / "config.json"


def get_log_folder() -> pathlib.Path | data.Error:
    root = _root_dir()
    if isinstance(root, data.Error):
        return root

    try:
        folder = root / "logs"
        folder.mkdir(exist_ok=True)
        return folder
    except OSError as e:
        return data.Error.new(f"Could not create the log folder: {e!s}", root=root)
