"""Configuration of the magikku command line tool."""
from magikku.flags import Flags
from magikku.utils import join_sources
import os
import yaml


class ConfigException(Exception):
    pass


class Config:
    def __init__(self, flags=Flags.NONE, database=None, verbosity=0):
        """
        Store configuration of magikku.
        :param flags: Flags of the created Magic objects.
        :param database: Magic database(s) separated by colons, None for the
            default database.
        :param verbosity: Verbosity level.
        """
        self.flags = Flags(flags)
        self.database = database
        self.verbosity = verbosity

    @staticmethod
    def parse_flags(value):
        """
        Parse flags given either as an integer or as a list of flag names.
        """
        if isinstance(value, bool):
            raise ConfigException("flags must be an integer or a list")
        if value is None:
            return Flags.NONE
        if isinstance(value, int):
            return Flags(value)
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list) or \
                not all(isinstance(name, str) for name in value):
            raise ConfigException("flags must be an integer or a list of "
                                  "flag names")
        try:
            return Flags.from_names(value)
        except ValueError as e:
            raise ConfigException(str(e))

    @staticmethod
    def parse_database(value):
        """Parse a database given as a string or a list of paths."""
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, list) and \
                all(isinstance(path, str) for path in value):
            return join_sources(value)
        raise ConfigException("database must be a string or a list of paths")

    @classmethod
    def from_file(cls, path):
        """
        Create the configuration from a YAML file. The file may contain the
        "flags" key (an integer or a list of flag names) and the "database"
        key (a path or a list of paths).
        :param path: Path to the configuration file.
        """
        if not os.access(path, os.R_OK):
            raise ConfigException(f"unable to read file {path}")
        with open(path, "r") as config_file:
            try:
                content = yaml.safe_load(config_file)
            except yaml.YAMLError as e:
                raise ConfigException(f"invalid configuration {path}: {e}")
        if content is None:
            content = {}
        if not isinstance(content, dict):
            raise ConfigException(f"invalid configuration {path}: "
                                  "expected a mapping")
        unknown = set(content) - {"flags", "database"}
        if unknown:
            raise ConfigException("unknown configuration keys: " +
                                  ", ".join(sorted(map(str, unknown))))
        return cls(flags=cls.parse_flags(content.get("flags")),
                   database=cls.parse_database(content.get("database")))

    @classmethod
    def from_args(cls, args):
        """
        Create the configuration from command line arguments.
        :param args: Command line arguments
        """
        if args.config:
            config = cls.from_file(args.config)
        else:
            config = cls()
        config.update_from_args(args)
        return config

    def update_from_args(self, args):
        """
        Update the configuration based on magikku command line arguments.
        Flags given on the command line are added to the configured ones,
        the database replaces the configured one.
        :param args: magikku command line arguments.
        """
        if args.flag:
            self.flags |= self.parse_flags(args.flag)
        if getattr(args, "mime", False):
            self.flags |= Flags.MIME
        if args.magic_file:
            self.database = join_sources(args.magic_file)
        self.verbosity = args.verbose

    def as_options(self):
        """Return the options for creating a Magic object."""
        return {"flags": self.flags, "database": self.database}
