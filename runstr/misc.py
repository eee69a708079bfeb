# --                                                            ; {{{1
#
# File        : runstr/misc.py
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
Character classes, regexes and operator tables.

>>> line_rest("print x; // ok\nprint y;", 9)
'// ok'
>>> line_rest("print x;", 8)
''
"""                                                             # }}}1

import regex, string, sys

                                                                # {{{1
IDENT, NUMBER, STRING = "identifier", "number", "string"
PUNCT, UNKNOWN        = "punctuation", "unknown"

S_IDENT_HEAD      = string.ascii_letters + "_"
S_DIGITS          = string.digits
S_PUNCT           = "-+*/%<=>!&|{}()[];"
S_QUOTES          = "'\""
S_SOFT, S_HARD    = '"', "'"
DOUBLE_OPS        = "&& || <= >= == !=".split()

RX_IDENT          = r"[A-Za-z_][A-Za-z0-9_]*"
RX_NUMBER         = r"[0-9.]+"
RX_SOFT_STRING    = r'"(?:[^"\\]|\\[\s\S])*"'
RX_HARD_STRING    = r"'(?:[^'\\]|\\[\s\S])*'"

RX_TRIVIA         = regex.compile(r"(?:[ \t\r\n]+|//[^\n]*)*")
RX_LINE_REST      = regex.compile(r"[^\r\n]*")
RX_ESCAPE         = regex.compile(r"\\([\s\S])")

ESCAPES           = { "n": "\n", "r": "\r", "t": "\t",
                      '"': '"', "\\": "\\" }
                                                                # }}}1

                                                                # {{{1
# binding powers; ")" ends a sub-expression
INFIX_PREC        = { ")": 0, "||": 2, "&&": 3,
                      "==": 4, "!=": 4,
                      "<": 5, ">": 5, "<=": 5, ">=": 5,
                      "+": 6, "-": 6,
                      "*": 7, "/": 7, "%": 7 }
PREFIX_BP         = 8
GROUP_BP          = 1
                                                                # }}}1

def classify(c):                                                # {{{1
  """
  Token kind for a lexeme starting with character c.

  >>> [ classify(c) for c in "x_7+'" ]
  ['identifier', 'identifier', 'number', 'punctuation', 'string']
  >>> classify(""), classify("@")
  ('unknown', 'unknown')
  """

  if not c            : return UNKNOWN
  if c in S_IDENT_HEAD: return IDENT
  if c in S_DIGITS    : return NUMBER
  if c in S_PUNCT     : return PUNCT
  if c in S_QUOTES    : return STRING
  return UNKNOWN
                                                                # }}}1

def skip_trivia(s, i):
  """Offset of the first non-whitespace, non-comment char at/after i."""
  return RX_TRIVIA.match(s, i).end()

def line_rest(s, i):
  """Rest of the line starting at i."""
  return RX_LINE_REST.match(s, i).group()

def unescape(s):                                                # {{{1
  r"""
  Decode soft string contents; only \n \r \t \" \\ are allowed.

  >>> unescape(r"foo\nbar\t\"\\")
  'foo\nbar\t"\\'
  >>> try: unescape(r"foo\qbar")
  ... except ValueError as e: print(e)
  \q
  """

  def f(m):
    c = m.group(1)
    if c not in ESCAPES: raise ValueError("\\" + c)
    return ESCAPES[c]
  return RX_ESCAPE.sub(f, s)
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
