from argparse import ArgumentParser
from magikku.flags import Flags
import magikku
import magikku.commands
import sys

FLAG_NAMES = sorted(name.lower().replace("_", "-")
                    for name in Flags.__members__)


def make_argument_parser():
    """Parsing CLI arguments."""
    ap = ArgumentParser(description="File type identification using "
                                    "libmagic.")
    ap.add_argument("-v", "--verbose",
                    help="increase output verbosity",
                    action="count", default=0)
    ap.add_argument("-c", "--config",
                    help="YAML configuration file with flags and database")
    ap.add_argument("-f", "--flag",
                    action="append", default=[],
                    choices=FLAG_NAMES, metavar="FLAG",
                    help="libmagic flag to set (can be repeated), one of: "
                         + ", ".join(FLAG_NAMES))
    ap.add_argument("-m", "--magic-file",
                    action="append",
                    help="magic database or magic source to use instead of "
                         "the default one (can be repeated)")
    ap.add_argument("--version", action="version",
                    version="%(prog)s " + magikku.__version__)
    sub_ap = ap.add_subparsers(dest="command", metavar="command")
    sub_ap.required = True

    # "file" sub-command
    file_ap = sub_ap.add_parser("file",
                                help="identify files")
    file_ap.add_argument("paths", nargs="+",
                         help="files to identify")
    file_ap.add_argument("-i", "--mime",
                         help="print MIME type and encoding",
                         action="store_true")
    file_ap.add_argument("-r", "--recursive",
                         help="identify contents of directories too",
                         action="store_true")
    file_ap.set_defaults(func=magikku.commands.identify_files)

    # "buffer" sub-command
    buffer_ap = sub_ap.add_parser("buffer",
                                  help="identify data read from a file or "
                                       "from the standard input")
    buffer_ap.add_argument("input", nargs="?",
                           help="file to read (default: standard input)")
    buffer_ap.add_argument("-i", "--mime",
                           help="print MIME type and encoding",
                           action="store_true")
    buffer_ap.set_defaults(func=magikku.commands.identify_buffer)

    # "compile" sub-command
    compile_ap = sub_ap.add_parser("compile",
                                   help="compile magic sources into .mgc "
                                        "files in the current directory")
    compile_ap.add_argument("sources", nargs="?",
                            help="colon separated magic files or "
                                 "directories (default: default database)")
    compile_ap.set_defaults(func=magikku.commands.compile_sources)

    # "check" sub-command
    check_ap = sub_ap.add_parser("check",
                                 help="check syntax of magic sources")
    check_ap.add_argument("sources", nargs="?",
                          help="colon separated magic files "
                               "(default: default database)")
    check_ap.set_defaults(func=magikku.commands.check_sources)

    # "path" sub-command
    path_ap = sub_ap.add_parser("path",
                                help="print the default database path")
    path_ap.set_defaults(func=magikku.commands.print_path)
    return ap


def run_from_cli(argv=None):
    """Main method to run the tool."""
    ap = make_argument_parser()
    args = ap.parse_args(argv)
    return args.func(args)


def main():
    sys.exit(run_from_cli())
