# --                                                            ; {{{1
#
# File        : runstr/__init__.py
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
runstr - a tiny embeddable scripting language

Scripts are made of assignments, print, if, while and blocks; values
are numbers, strings and null.  The source is parsed and evaluated in
a single pass; there is no AST.

>>> from runstr import eval_str
>>> _ = eval_str("i = 0; while i < 2 { print 'i: ' + i; i = i + 1; }")
i: 0
i: 1
"""                                                             # }}}1

__version__ = "0.1.0"

from .eval import Evaluator, eval_str, eval_stream, eval_file, run
from .data import RunStrError, ScriptError

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
