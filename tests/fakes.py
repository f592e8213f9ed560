import json


class FakeResponse:
    def __init__(self, status_code=204, body=""):
        self.status_code = status_code
        self._body = body
        self.body_read = False
        self.closed = False

    @property
    def text(self):
        self.body_read = True
        return self._body

    def close(self):
        self.closed = True


class FakeSession:
    """
    Stands in for requests.Session. `script` is a list of FakeResponse or
    exception instances, consumed one per post(); the last one repeats.
    """
    def __init__(self, script=None):
        self.script = list(script or [FakeResponse(204)])
        self.calls = []
        self.closed = False

    def post(self, url, data=None, headers=None, timeout=None, stream=False):
        self.calls.append({"url": url, "data": data, "headers": headers,
                           "timeout": timeout, "stream": stream})
        item = self.script.pop(0) if len(self.script) > 1 else self.script[0]
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.closed = True

    def sent_batches(self):
        return [json.loads(c["data"]) for c in self.calls]
