import json
from typing import List


class KeyspaceFileError(Exception):
    pass


def load_keyspaces(path: str) -> List[str]:
    """Reads the keyspace list (a JSON array of strings) once at startup."""
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except OSError as e:
        raise KeyspaceFileError(f"cannot read keyspaces file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise KeyspaceFileError(f"cannot decode keyspaces file {path}: {e}") from e

    if not isinstance(data, list) or not all(isinstance(k, str) for k in data):
        raise KeyspaceFileError(f"{path} must contain a JSON array of strings")
    if not data:
        raise KeyspaceFileError(f"{path} does not list any keyspace")
    return data
