import io
import subprocess
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from PIL import Image

# Make src importable without installing the package
REPO_ROOT = Path(__file__).resolve().parent.parent
SRC = REPO_ROOT / "src"
sys.path.insert(0, str(SRC))


def _encode(mode: str, color, image_format: str) -> bytes:
    output = io.BytesIO()
    Image.new(mode, (8, 6), color).save(output, format=image_format)
    return output.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return _encode("RGBA", (255, 0, 0, 128), "PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return _encode("RGB", (0, 128, 255), "JPEG")


@pytest.fixture
def fake_commands(monkeypatch):
    """
    Replace subprocess.run with a table of canned responses.

    Responses are looked up by the full command tuple first, then by the
    executable name. A bytes value is returned as stdout, an int is raised
    as a non-zero exit, a callable is called with (command, input) and its
    result handled the same way. Unknown executables raise FileNotFoundError.
    """
    responses = {}
    calls = []

    def run(command, input=None, stdout=None, stderr=None, check=False, **kwargs):
        command = list(command)
        calls.append(SimpleNamespace(command=command, input=input))
        response = responses.get(tuple(command), responses.get(command[0]))
        if response is None:
            raise FileNotFoundError(command[0])
        if callable(response):
            response = response(command, input)
        if isinstance(response, int):
            raise subprocess.CalledProcessError(
                response, command, output=b"", stderr=b"command failed")
        return subprocess.CompletedProcess(command, 0, stdout=response, stderr=b"")

    monkeypatch.setattr(subprocess, "run", run)
    return SimpleNamespace(responses=responses, calls=calls)


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    directory = tmp_path / "config"
    monkeypatch.setenv("CLIPPUB_CONFIG_DIR", str(directory))
    return directory
