# --                                                            ; {{{1
#
# File        : runstr/data.py
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
Values, operators, scope and errors.

Values are plain python objects: numbers are floats, strings are
strs, and null is None.

>>> show(add("i: ", 3.0))
'i: 3'
>>> show(add(2.0, "a"))
'3'
>>> show(sub("a..b..c", "."))
'abc'
>>> show(rem(None, "x"))
'0'
"""                                                             # }}}1

import decimal, math, operator, sys

from functools import partial

# === Exceptions ===

class RunStrError(Exception):
  """Base class for runstr errors"""

class ScriptError(RunStrError):                                 # {{{1
  """
  Fatal error in a script, at a line and column.

  >>> print(ParseError("Expected a semicolon", 1, 8, "print"))
  Expected a semicolon at 1:8 `print`
  >>> print(ParseError("Expected a semicolon", 3, 1, ""))
  Expected a semicolon at 3:1 (EOF)
  """

  def __init__(self, msg, line, col, preview):
    self.msg, self.line, self.col = msg, line, col
    self.preview = preview
    where = "`{}`".format(preview) if preview else "(EOF)"
    super().__init__("{} at {}:{} {}".format(msg, line, col, where))
                                                                # }}}1

class LexicalError(ScriptError):
  """Unterminated string, invalid escape, malformed number, etc."""

class ParseError(ScriptError):
  """Unexpected token."""

class SemanticError(ScriptError):
  """Unknown variable, unusable operand."""

class OperandError(RunStrError):
  """Operand that an operator can't use; has no position (yet)."""

# === Scope ===

def new_scope(**bindings):
  """
  New (global) scope.

  >>> new_scope()
  {'null': None}
  >>> sorted(new_scope(x = 1.0).items())
  [('null', None), ('x', 1.0)]
  """
  return dict(null = None, **bindings)

# === Conversion ===

def truthy(x):
  """null is the only falsy value."""
  return x is not None

def boolean(b):
  return 1.0 if b else None

def num(x, unit):                                               # {{{1
  """
  Numeric value; strings count as 1, null as unit.

  >>> num(4.5, 0), num("", 0), num("abc", 1), num(None, 1)
  (4.5, 1.0, 1.0, 1.0)
  """

  if isinstance(x, float): return x
  if isinstance(x, str): return 1.0
  return float(unit)
                                                                # }}}1

def show_number(n):                                             # {{{1
  """
  Shortest round-trip representation, w/o exponent or trailing .0.

  >>> [ show_number(x) for x in [2.0, 2.3, 0.0, -0.0, 0.5, -1.0] ]
  ['2', '2.3', '0', '-0', '0.5', '-1']
  >>> show_number(1e21), show_number(1.5e-7)
  ('1000000000000000000000', '0.00000015')
  >>> [ show_number(x) for x in [math.inf, -math.inf, math.nan] ]
  ['inf', '-inf', 'NaN']
  """

  if math.isnan(n): return "NaN"
  if math.isinf(n): return "inf" if n > 0 else "-inf"
  s = repr(n)
  if "e" in s: s = format(decimal.Decimal(s), "f")
  return s[:-2] if s.endswith(".0") else s
                                                                # }}}1

def text(x):
  """String form used when appending; null is empty."""
  if x is None: return ""
  return x if isinstance(x, str) else show_number(x)

def show(x):
  """
  Display form (for print).

  >>> show(None), show("foo"), show(42.0)
  ('NULL', 'foo', '42')
  """
  return "NULL" if x is None else text(x)

def _count(x):
  n = num(x, 0)
  if math.isnan(n): return 0
  if math.isinf(n): return sys.maxsize if n > 0 else -sys.maxsize
  return math.floor(n)

# === Unary Operators ===

def neg(x):
  """
  >>> neg(2.0), neg("abc测"), neg(None)
  (-2.0, '测cba', None)
  """
  if isinstance(x, float): return -x
  if isinstance(x, str): return x[::-1]
  return None

def not_(x):
  """
  >>> not_(None), not_(0.0), not_("")
  (1.0, None, None)
  """
  return boolean(not truthy(x))

# === Binary Operators ===

def _fdiv(a, b):
  if b: return a / b
  if a == 0 or math.isnan(a): return math.nan
  return math.copysign(math.inf, a) * math.copysign(1.0, b)

def _fmod(a, b):
  if b == 0 or math.isinf(a): return math.nan
  return math.fmod(a, b)

def add(x, y):
  """
  >>> add(1.0, 2.0), add("a", "b"), add("a", None), add(None, "a")
  (3.0, 'ab', 'a', 'a')
  """
  if isinstance(x, float): return x + num(y, 0)
  if isinstance(x, str): return x + text(y)
  return y

def sub(x, y):                                                  # {{{1
  """
  Strings: remove every occurrence of the pattern.

  >>> sub(3.0, 2.0), sub(3.0, None)
  (1.0, 3.0)
  >>> sub("a..b..c", ".."), sub("a.b.c", ".."), sub("a.b.c", "")
  ('abc', 'a.b.c', 'a.b.c')
  >>> sub("a1b1", 1.0)
  'ab'
  """

  if isinstance(x, float): return x - num(y, 0)
  if isinstance(x, str):
    pat = text(y)
    return x.replace(pat, "") if pat else x
  return y
                                                                # }}}1

def mul(x, y):                                                  # {{{1
  """
  Strings: repeat; a negative count repeats the reversed string.

  >>> mul(2.5, 2.0), mul(2.5, None)
  (5.0, 2.5)
  >>> [ mul("ab", n) for n in [2.0, 1.0, 0.0, -1.0, -2.0, None, "x"] ]
  ['abab', 'ab', '', 'ba', 'baba', '', 'ab']
  >>> mul("", 2.0), mul("ab", 1.9)
  ('', 'ab')
  >>> try: mul("ab", math.inf)
  ... except OperandError as e: print(e)
  repeat count too large: inf
  >>> try: mul("ab", 1e30)
  ... except OperandError as e: print(e)
  repeat count too large: 1000000000000000000000000000000
  """

  if isinstance(x, float): return x * num(y, 1)
  if isinstance(x, str):
    n = num(y, 0)
    if x and math.isinf(n):
      raise OperandError("repeat count too large: " + show_number(n))
    k = _count(y)
    if len(x) * abs(k) > sys.maxsize:
      raise OperandError("repeat count too large: " + show_number(n))
    try:
      return x * k if k >= 0 else x[::-1] * -k
    except MemoryError:
      raise OperandError("repeat count too large: " + show_number(n))
  return y
                                                                # }}}1

def div(x, y):                                                  # {{{1
  """
  Strings: drop the first k characters.

  >>> div(3.0, 2.0), div(3.0, None), div(1.0, 0.0), div(-1.0, 0.0)
  (1.5, 3.0, inf, -inf)
  >>> [ div("abc", float(n)) for n in range(5) ]
  ['abc', 'bc', 'c', '', '']
  >>> div("测试", 1.0), div("abc", -1.0), div("abc", math.inf)
  ('试', 'abc', '')
  """

  if isinstance(x, float): return _fdiv(x, num(y, 1))
  if isinstance(x, str): return x[max(0, _count(y)):]
  return y
                                                                # }}}1

def rem(x, y):                                                  # {{{1
  """
  Strings: keep the first k characters.

  >>> rem(5.0, 2.0), rem(-4.0, 3.0), rem(6.0, 3.0), rem(5.0, None)
  (1.0, -1.0, 0.0, 0.0)
  >>> math.isnan(rem(1.0, 0.0))
  True
  >>> [ rem("abc测试", float(n)) for n in range(0, 7, 2) ]
  ['', 'ab', 'abc测', 'abc测试']
  """

  if isinstance(x, float): return _fmod(x, num(y, 1))
  if isinstance(x, str): return x[:max(0, _count(y))]
  return 0.0
                                                                # }}}1

def _rank(x):
  if x is None: return 0
  return 1 if isinstance(x, float) else 2

def compare(op, x, y):                                          # {{{1
  """
  Total order: null < numbers < strings.

  Numbers use standard float comparison, so NaN is the exception: it
  is unordered and unequal to everything, itself included.

  >>> compare(operator.lt, 1.0, 2.0), compare(operator.lt, 1.0, 1.0)
  (1.0, None)
  >>> compare(operator.lt, 99.0, ""), compare(operator.gt, "a", None)
  (1.0, 1.0)
  >>> compare(operator.eq, 0.0, None), compare(operator.eq, None, None)
  (None, 1.0)
  >>> compare(operator.lt, "abc", "abd")
  1.0
  >>> [ compare(op, math.nan, math.nan)
  ...   for op in [operator.eq, operator.le, operator.ne] ]
  [None, None, 1.0]
  """

  rx, ry = _rank(x), _rank(y)
  if rx != ry or x is None: return boolean(op(rx, ry))
  return boolean(op(x, y))
                                                                # }}}1

def replace(x, y):
  return y

BINARY_OPS = {
  "+": add, "-": sub, "*": mul, "/": div, "%": rem,
  "<" : partial(compare, operator.lt),
  "<=": partial(compare, operator.le),
  ">" : partial(compare, operator.gt),
  ">=": partial(compare, operator.ge),
  "==": partial(compare, operator.eq),
  "!=": partial(compare, operator.ne),
  "&&": replace, "||": replace,
}

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
