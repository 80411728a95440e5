import sys
import argparse
import logging

import colorlog

from .main.main import main as _main
from counterstyle import __version__ as counterstyle_version


def setup_logging(level):
    # You should use colorlog >= 6.0.0a4
    handler = colorlog.StreamHandler()
    handler.setFormatter( colorlog.LevelFormatter(
        log_colors={
            "DEBUG": "white",
            "INFO": "",
            "WARNING": "red",
            "ERROR": "bold_red",
            "CRITICAL": "bold_red",
        },
        fmt={
            "DEBUG":    "%(log_color)s〰️    %(message)s",
            "INFO":     "%(log_color)s✨  %(message)s",
            "WARNING":  "%(log_color)s⚠️   %(message)s",
            "ERROR":    "%(log_color)s🚨  %(message)s",
            "CRITICAL": "%(log_color)s🚨  %(message)s",
        },
        stream=sys.stderr
    ) )

    root = colorlog.getLogger()
    root.addHandler(handler)

    root.setLevel(level)



def run_main(cmdargs=None, enable_debug_pdb=False, exit_code_on_error=1):
    try:
        _run_main_inner(cmdargs)
    except (ValueError, KeyError, OSError) as e:
        logging.getLogger('counterstyle').debug("Got error, traceback = ", exc_info=True)
        logging.getLogger('counterstyle').critical(
            f"Error: {e}",
        )
        if enable_debug_pdb:
            import pdb
            pdb.post_mortem()
        elif exit_code_on_error is not None:
            sys.exit(exit_code_on_error)
    except Exception as e:
        logging.getLogger('counterstyle').critical('Error.', exc_info=e)
        if enable_debug_pdb:
            import pdb
            pdb.post_mortem()
        elif exit_code_on_error is not None:
            sys.exit(exit_code_on_error)


def _run_main_inner(cmdargs=None):

    args_parser = argparse.ArgumentParser(
        prog='counterstyle',
        description='Render list markers and outline numbers with CSS-like counter styles',
        epilog='Have a lot of counting fun!',
    )

    args_parser.add_argument('-s', '--style', action='store',
                             default=None,
                             help="Name of the counter style to use (e.g. ‘lower-roman’, "
                             "‘hebrew’, or a style defined in the config file).  Defaults "
                             "to the config's ‘default-style’, or ‘decimal’.")

    args_parser.add_argument('-t', '--template', action='store',
                             default=None,
                             help="Template joining several styles, e.g. "
                             "‘${upper-roman}.${lower-alpha}’")

    args_parser.add_argument('-T', '--tag-template', action='store',
                             default=None,
                             help="LaTeX enumerate-like tag template, e.g. ‘(a)’ or ‘i.’")

    args_parser.add_argument('-C', '--config', action='store',
                             default=None,
                             help="YAML Configuration file with custom counter style "
                             "definitions.  By default, ‘counterstyle.yaml’ will be used "
                             "in the current directory if it exists.")

    args_parser.add_argument('--from', action='store', type=int, dest='start',
                             default=None,
                             help="Render all indices from this one (together with --to)")

    args_parser.add_argument('--to', action='store', type=int, dest='stop',
                             default=None,
                             help="Render all indices up to this one, inclusive")

    args_parser.add_argument('-l', '--list-styles', action='store_true',
                             default=False,
                             help="List the names of all available counter styles")

    args_parser.add_argument('-o', '--output', action='store',
                             default=None,
                             help="Output file name (stdout by default or with ‘--output=-’)")

    args_parser.add_argument('-S', '--separator', action='store',
                             default=None,
                             help="Separator between labels (a newline by default)")

    args_parser.add_argument('-n', '--suppress-final-newline', action='store_true',
                             default=False,
                             help="Do not add a newline at the end of the output")

    args_parser.add_argument('-v', '--verbose', action='store_true',
                             default=False,
                             help="Enable verbose debugging output")

    args_parser.add_argument('--version', action='version', version=counterstyle_version)

    args_parser.add_argument('indices', metavar="INDEX", nargs='*', type=int,
                             help='Indices to render')

    # --

    args = args_parser.parse_args(args=cmdargs)


    #
    # set up logging
    #
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    setup_logging(level=level)


    #
    # Dispatch call to our main function
    #

    d = dict(args.__dict__)
    d.pop('verbose')

    _main(**d)

    return



if __name__ == '__main__':
    run_main()
