"""Unit tests for the Config class."""

from magikku.cli import make_argument_parser
from magikku.config import Config, ConfigException
from magikku.flags import Flags
import pytest


def write_config(tmp_path, content):
    config_file = tmp_path / "magikku.yaml"
    config_file.write_text(content)
    return str(config_file)


def test_defaults():
    config = Config()
    assert config.flags == Flags.NONE
    assert config.database is None
    assert config.as_options() == {"flags": Flags.NONE, "database": None}


def test_from_file_flag_names(tmp_path):
    path = write_config(tmp_path, """
flags:
  - mime-type
  - mime-encoding
  - symlink
database:
  - /usr/share/misc/magic.mgc
  - rules/local
""")
    config = Config.from_file(path)
    assert config.flags == Flags.MIME | Flags.SYMLINK
    assert config.database == "/usr/share/misc/magic.mgc:rules/local"


def test_from_file_flag_value(tmp_path):
    path = write_config(tmp_path, "flags: 0x410\ndatabase: local.mgc\n")
    config = Config.from_file(path)
    assert config.flags == Flags.MIME
    assert config.database == "local.mgc"


def test_from_empty_file(tmp_path):
    config = Config.from_file(write_config(tmp_path, ""))
    assert config.flags == Flags.NONE
    assert config.database is None


@pytest.mark.parametrize("content", [
    "- not a mapping\n",
    "flags: [bogus]\n",
    "flags: true\n",
    "flags: {mime: 1}\n",
    "database: 42\n",
    "unknown: 1\n",
    "flags: [unclosed\n",
], ids=["list", "unknown-flag", "bool-flags", "mapping-flags",
        "int-database", "unknown-key", "invalid-yaml"])
def test_from_file_invalid(tmp_path, content):
    with pytest.raises(ConfigException):
        Config.from_file(write_config(tmp_path, content))


def test_from_missing_file(tmp_path):
    with pytest.raises(ConfigException):
        Config.from_file(str(tmp_path / "missing.yaml"))


def test_from_args(tmp_path):
    """Flags from the command line are added, the database is replaced."""
    path = write_config(tmp_path, "flags: [symlink]\ndatabase: a.mgc\n")
    args = make_argument_parser().parse_args(
        ["-v", "-c", path, "-f", "raw", "-m", "b.mgc", "-m", "c.mgc",
         "file", "--mime", "test.txt"])
    config = Config.from_args(args)
    assert config.flags == Flags.SYMLINK | Flags.RAW | Flags.MIME
    assert config.database == "b.mgc:c.mgc"
    assert config.verbosity == 1
