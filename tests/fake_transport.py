class FakeTransport:
    def __init__(self, responses=None, fail_on=None):
        self.calls = []
        self.responses = responses
        self.fail_on = fail_on

    def __call__(self, method, body, qs):
        idx = len(self.calls)
        self.calls.append((method, body, qs))
        if self.fail_on is not None and idx == self.fail_on:
            raise RuntimeError("boom")
        if self.responses is not None:
            return self.responses[idx]
        return {"id": f"msg-{idx}", "recipients": {"totalCount": len(body["recipients"])}}

