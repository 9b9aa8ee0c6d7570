"""Unit tests for the single-operation convenience functions."""

from magikku.convenience import (check_syntax_once, compile_once,
                                 default_database_path, identify_buffer_once,
                                 identify_file_once)
from magikku.errors import CompileError, DatabaseLoadError, MagicError
from magikku.flags import Flags
import pytest
from conftest import sample_file


def test_identify_file_once(fake_engine):
    assert identify_file_once(sample_file("test.txt"),
                              engine=fake_engine) == "ASCII text"
    assert identify_file_once(sample_file("test.txt"), {"flags": Flags.MIME},
                              engine=fake_engine) == \
        "text/plain; charset=us-ascii"
    assert fake_engine.open_cookies == set()
    assert len(fake_engine.closed_cookies) == 2


def test_identify_buffer_once(fake_engine):
    assert identify_buffer_once(b"\x01\x02\x03\x04",
                                engine=fake_engine) == "data"
    assert fake_engine.open_cookies == set()


def test_compile_once(fake_engine):
    assert compile_once("rules", engine=fake_engine) is True
    assert ("compile", "rules") in fake_engine.calls
    assert fake_engine.open_cookies == set()


def test_check_syntax_once(fake_engine):
    assert check_syntax_once("rules", engine=fake_engine) is True
    fake_engine.check_result = -1
    assert check_syntax_once(engine=fake_engine) is False
    assert ("check", None) in fake_engine.calls
    assert fake_engine.open_cookies == set()


@pytest.mark.parametrize("operation, args, error", [
    (identify_file_once, (sample_file("totallybogusfile"),),
     FileNotFoundError),
    (identify_buffer_once, ("not bytes",), TypeError),
    (compile_once, ("rules",), CompileError),
])
def test_release_on_failure(fake_engine, operation, args, error):
    """The handle is closed even if the operation fails."""
    fake_engine.compile_result = -1
    with pytest.raises(error):
        operation(*args, engine=fake_engine)
    assert fake_engine.open_cookies == set()
    assert len(fake_engine.closed_cookies) == 1


def test_open_failure(fake_engine):
    fake_engine.load_result = -1
    with pytest.raises(DatabaseLoadError):
        identify_buffer_once(b"foo", {"database": "bogus"},
                             engine=fake_engine)
    assert fake_engine.open_cookies == set()


def test_buffer_failure_is_magic_error(fake_engine):
    fake_engine.buffer = lambda cookie, data: None
    with pytest.raises(MagicError):
        identify_buffer_once(b"foo", engine=fake_engine)
    assert fake_engine.open_cookies == set()


def test_default_database_path(fake_engine):
    assert default_database_path(fake_engine) == "/usr/share/misc/magic"


def test_convenience_with_libmagic(engine, in_tmp_dir):
    assert identify_file_once(sample_file("test.txt"),
                              engine=engine) == "ASCII text"
    assert identify_buffer_once(b"\x01\x02\x03\x04", {"flags": Flags.MIME},
                                engine=engine) == \
        "application/octet-stream; charset=binary"
    assert check_syntax_once(sample_file("magikku_magicrules"),
                             engine=engine) is True
    assert check_syntax_once(sample_file("fail_magicrules"),
                             engine=engine) is False
    assert compile_once(sample_file("magikku_magicrules"),
                        engine=engine) is True
    assert (in_tmp_dir / "magikku_magicrules.mgc").is_file()
    with pytest.raises(CompileError):
        compile_once(sample_file("fail_magicrules"), engine=engine)
