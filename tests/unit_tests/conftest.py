import os
import pytest
from magikku.binding import BINDING_MODULES, load_engine
from magikku.flags import Flags
from magikku.libmagic.engine import NativeEngine

SAMPLES_DIR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "samples"))


def sample_file(filename):
    """Absolute path to a file in the samples directory."""
    return os.path.join(SAMPLES_DIR, filename)


def available_engines():
    """Engines of all libmagic bindings that can be loaded."""
    engines = []
    for name, _ in BINDING_MODULES:
        try:
            engines.append(load_engine(name))
        except ImportError:
            pass
    return engines


ENGINES = available_engines()


class FakeCookie:
    """Native handle of the FakeEngine."""
    def __init__(self, number, flags):
        self.number = number
        self.flags = flags
        self.database = None
        self.error = None
        self.errno = 0


class FakeEngine(NativeEngine):
    """
    Engine that does not call libmagic. Keeps track of the open cookies and
    of the native calls so that leaks and uses of closed handles can be
    checked. The results of the native calls can be set through attributes.
    """
    name = "fake"

    def __init__(self):
        self.open_cookies = set()
        self.closed_cookies = []
        self.calls = []
        self.opened = 0
        # Results of the native calls
        self.open_result = True
        self.load_result = 0
        self.setflags_result = 0
        self.check_result = 0
        self.compile_result = 0
        self.file_result = None
        self.buffer_result = None
        self.error_message = "fake error"
        self.error_errno = 0

    def _use(self, cookie, call, *args):
        assert cookie in self.open_cookies, f"{call} on a closed cookie"
        self.calls.append((call,) + args)

    def _fail(self, cookie):
        cookie.error = self.error_message
        cookie.errno = self.error_errno

    def open(self, flags):
        self.calls.append(("open", flags))
        if not self.open_result:
            return None
        self.opened += 1
        cookie = FakeCookie(self.opened, flags)
        self.open_cookies.add(cookie)
        return cookie

    def close(self, cookie):
        self._use(cookie, "close")
        self.open_cookies.remove(cookie)
        self.closed_cookies.append(cookie)

    def error(self, cookie):
        self._use(cookie, "error")
        return cookie.error

    def errno(self, cookie):
        self._use(cookie, "errno")
        return cookie.errno

    def file(self, cookie, path):
        self._use(cookie, "file", path)
        if self.file_result is not None:
            return self.file_result
        if cookie.flags & Flags.MIME:
            return "text/plain; charset=us-ascii"
        return "ASCII text"

    def buffer(self, cookie, data):
        self._use(cookie, "buffer", bytes(data), memoryview(data).nbytes)
        if self.buffer_result is not None:
            return self.buffer_result
        if cookie.flags & Flags.MIME:
            return "application/octet-stream; charset=binary"
        return "data"

    def setflags(self, cookie, flags):
        self._use(cookie, "setflags", flags)
        if self.setflags_result < 0:
            self._fail(cookie)
        else:
            cookie.flags = flags
        return self.setflags_result

    def check(self, cookie, sources):
        self._use(cookie, "check", sources)
        return self.check_result

    def compile(self, cookie, sources):
        self._use(cookie, "compile", sources)
        if self.compile_result != 0:
            self._fail(cookie)
        return self.compile_result

    def load(self, cookie, sources):
        self._use(cookie, "load", sources)
        if self.load_result != 0:
            self._fail(cookie)
        else:
            cookie.database = sources
        return self.load_result

    def getpath(self):
        self.calls.append(("getpath",))
        return "/usr/share/misc/magic"

    def constants(self):
        return {name: value for name, value in Flags.c_names()}


@pytest.fixture
def fake_engine():
    return FakeEngine()


@pytest.fixture(params=ENGINES or [None],
                ids=lambda engine: engine.name if engine else "no-libmagic")
def engine(request):
    """Each of the available libmagic engines."""
    if request.param is None:
        pytest.skip("libmagic is not available")
    return request.param


@pytest.fixture
def in_tmp_dir(tmp_path, monkeypatch):
    """Run the test inside a temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
