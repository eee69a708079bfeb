# --                                                            ; {{{1
#
# File        : runstr/__main__.py
# Maintainer  : Felix C. Stegerman <flx@obfusk.net>
# Date        : 2026-10-18
#
# Copyright   : Copyright (C) 2026  Felix C. Stegerman
# Version     : v0.1.0
# License     : GPLv3+
#
# --                                                            ; }}}1

                                                                # {{{1
r"""
Command line interface.

>>> import os, tempfile
>>> d = tempfile.mkdtemp(); f = os.path.join(d, "x.rs")
>>> with open(f, "w") as fh: _ = fh.write("x = 6; print x * 7;")
>>> main(f)
42
0
>>> with open(f, "w") as fh: _ = fh.write("print 1; print y;")
>>> main(f)
1
3
>>> with open(f, "w") as fh: _ = fh.write("print 'ab' * 1" + "0" * 30 + ";")
>>> main(f)
3
>>> main(os.path.join(d, "nope.rs"))
1
>>> try: main()
... except SystemExit as e: print(e.code)
2
>>> try: main(f, f)
... except SystemExit as e: print(e.code)
2
>>> try: main("--version")
... except SystemExit as e: print(e.code)
runstr 0.1.0
0
>>> try: main("-h") # doctest: +ELLIPSIS
... except SystemExit as e: print(e.code)
usage: runstr ...
0
"""                                                             # }}}1

import argparse, os, sys

from . import __version__
from . import eval as E

_me   = "runstr"
_desc = "runstr - run a little script"

EXIT_OK, EXIT_IO, EXIT_USAGE, EXIT_SCRIPT = 0, 1, 2, 3

def main(*args):                                                # {{{1
  """Main program."""
  p = _argument_parser(); n = p.parse_args(args)
  if n.test: return test(verbose = n.verbose)
  if n.script is None:
    p.error("the following arguments are required: SCRIPT")
  try:
    s = _read(n.script)
  except OSError as e:
    print("{}: {}".format(_me, e), file = sys.stderr)
    return EXIT_IO
  _, e = E.run(s)
  if e:
    sys.stdout.flush()
    print("*** Error ***", e, file = sys.stderr)
    return EXIT_SCRIPT
  return EXIT_OK
                                                                # }}}1

def _read(name):
  if name == "-": return "".join(sys.stdin)
  with open(name, encoding = "utf-8") as f:
    return f.read()

def _argument_parser():                                         # {{{1
  p = argparse.ArgumentParser(description = _desc, prog = _me)
  p.add_argument("script", metavar = "SCRIPT", nargs = "?",
                 help = "script to run (- for stdin)")
  p.add_argument("--version", "-v", action = "version",
                 version = "%(prog)s {}".format(__version__))
  p.add_argument("--test", action = "store_true",
                 help = "run tests (instead of the interpreter)")
  p.add_argument("--verbose", action = "store_true",
                 help = "run tests verbosely")
  return p
                                                                # }}}1

def test(verbose = False):                                      # {{{1
  """Run doctest on all modules."""
  import doctest, importlib, pkgutil
  tot_f, tot_t = 0, 0
  for x in pkgutil.iter_modules([os.path.dirname(__file__)]):
    m = importlib.import_module("."+x.name, __package__)
    if verbose: print("Testing module {} ...".format(x.name))
    f, t = doctest.testmod(m, verbose = verbose)
    tot_f += f; tot_t += t
    if verbose: print()
  if verbose:
    print("Summary:")
    print("{} passed and {} failed.".format(tot_t - tot_f, tot_f))
    if tot_f == 0: print("Test passed.")
    else: print("***Test Failed*** {} failures.".format(tot_f))
  return 0 if tot_f == 0 else 1
                                                                # }}}1

def main_():
  """Entry point for main program."""
  return main(*sys.argv[1:])

if __name__ == "__main__":
  sys.exit(main_())

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
