"""
Stand-in HTTP session and responses for client tests.

Records every request so tests can inspect URLs, parameters and files.
"""

import io
import zipfile


class FakeResponse:
    """Minimal requests.Response replacement."""

    def __init__(self, status_code=200, text="", content=b"", chunk_size=4, error=None):
        self.status_code = status_code
        self.text = text
        self.content = content
        self.chunk_size = chunk_size
        self.error = error
        self.closed = False

    def iter_content(self, chunk_size=1):
        data = self.content
        for offset in range(0, len(data), self.chunk_size):
            yield data[offset:offset + self.chunk_size]
        if self.error is not None:
            raise self.error

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


class FakeSession:
    """Replays queued responses and records requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []
        self.closed = False

    def request(self, method, url, **kwargs):
        files = kwargs.get("files") or {}
        # Multipart bodies are read while the request is sent
        uploaded = {
            name: (value[0], value[1].read(), value[1])
            for name, value in files.items()
        }
        self.requests.append({"method": method, "url": url, "kwargs": kwargs, "files": uploaded})

        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


def make_zip(entries):
    """Build ZIP archive bytes from a {name: text} mapping."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, text in entries.items():
            archive.writestr(name, text)
    return buffer.getvalue()
