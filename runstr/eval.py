# --                                                            ; {{{1
#
# File        : runstr/eval.py
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
Fused parser + evaluator.

>>> def t(s):
...   ev = Evaluator(s); ev.run()
...   assert ev.suppression == 0, "unbalanced suppression"
>>> def err(s):
...   try: eval_str(s)
...   except D.ScriptError as e: print(type(e).__name__ + ":", e)

Numbers and comments

>>> t("print 2; print 2.3; print 0;")
2
2.3
0
>>> t("print 2; // foo\n//bar\nprint 2.3;//baz")
2
2.3

Arithmetic and precedence

>>> t("print -2; print - -2; print -4%3; print 3-2-1; print 3-1/2-2;")
-2
2
-1
0
0.5
>>> t("print 3-(2-1); print ((3))-((2)-(1)); print 3 - - 2;")
2
2
5
>>> t("print 1/0; print -1/0; print 7 % 0; print 2 * null;")
inf
-inf
NaN
2

Logic and comparison

>>> t("print !null; print !0; print !!null; print !!3; print !!'';")
1
NULL
NULL
1
1
>>> t("print 1 < 2; print 1 <= 1; print 1 < 1; print 1 > 1;")
1
1
NULL
NULL
>>> t("print 1 < 2 == 3 < 4; print 1 < 2 != 3 < 4;")
1
NULL
>>> t("print 2 == null; print 2 != null; print 'a' > 99; print null < 0;")
NULL
1
1
1
>>> t("print 1 && 2; print 0 && 2; print null && 2; print 2 && null;")
2
2
NULL
NULL
>>> t("print 1 || 2; print 0 || 2; print null || 2; print null || null;")
1
0
2
NULL
>>> t("print null && 2 || 3 && 4; print 1 && 2 || 3 && 4;")
4
2
>>> t("print 1 && null || 3 && null || 5 && 6;")
6

Short-circuited operands are walked, but never evaluated

>>> t('print null && y; print 1 || y + "\\q"; print 1 && 2 || z;')
NULL
1
2

Strings

>>> t("print 'a'+'b'; print 'a'+2; print 2+'a'; print null+'a';")
ab
a2
3
a
>>> t("print 'a.b.c'-'.'; print 'a.b.c'-''; print 'a..b..c'-'..';")
abc
a.b.c
abc
>>> t("print 'ab'*2; print 'ab'*-2; print 'ab'*0; print 'ab'*'x';")
abab
baba
<BLANKLINE>
ab
>>> t("print 'abc'/1; print 'abc'%2; print '测试'/1; print 'abc测试'%4;")
bc
ab
试
abc测
>>> t("print -'abc'; print -null;")
cba
NULL
>>> t(r'''print 'foo\n\""'; print "foo\nbar"; print "foo\"bar";''')
foo\n\""
foo
bar
foo"bar
>>> out = []; _ = eval_str(r'print "a\tb";', sink = out.append); out
['a\tb\n']

Statements

>>> t("x = 2; x = 3; print x; x = 4; print x;")
3
4
>>> t("if 2 { if null { print 1; } print 2; } print 3;")
2
3
>>> t("if null { if null { print 1; } print 2; } print 3;")
3
>>> t("print 1; if 1 { print 2; if null { print 3; if 2 { print 4; }"
...   " print 5; } print 6; } print 7;")
1
2
6
7
>>> t("if null { print y; z = \"\\q\"; while 1 { print 1; } } print 2;")
2
>>> t("{ x = 1; { print x; } }")
1

Loops

>>> t("i = 0; while i < 3 { print i; i = i + 1; } print 'i: '+i;")
0
1
2
i: 3
>>> t("x=2;while x<3{print x;x=x+1;}print 'i: '+x;")
2
i: 3
>>> t("i = 3; while i < 3 { print i; i = i + 1; } print 'i: '+i;")
i: 3
>>> t("i = 0; while i < 2 { j = 0; while j < 2 { print i*10+j;"
...   " j = j+1; } i = i+1; }")
0
1
10
11

Errors

>>> err("  @  ")
LexicalError: Invalid input at 1:3 `@  `
>>> err("print 1;\nprint @;")
1
ParseError: Invalid expression at 2:7 `@;`
>>> err("print x;")
SemanticError: Unknown variable `x` at 1:7 `x;`
>>> err("print 1")
ParseError: Expected a semicolon at 1:8 (EOF)
>>> err("if 1 { print 1;")
1
ParseError: Expected a right brace at 1:16 (EOF)
>>> err("if 1 print 1;")
ParseError: Expected a left brace at 1:6 `print 1;`
>>> err("x 1;")
ParseError: Expected a `=` at 1:3 `1;`
>>> err("print (1;")
ParseError: Expected a close parentheses at 1:9 `;`
>>> err("print 1);")
ParseError: Invalid operator at 1:8 `);`
>>> err("+ 1;")
ParseError: Expected a command or assign at 1:1 `+ 1;`
>>> err("print 'abc;")
LexicalError: String literal not terminated at 1:7 `'abc;`
>>> err('print "abc;')
LexicalError: String literal not terminated at 1:7 `"abc;`
>>> err("print 1.2.3;")
LexicalError: Invalid number at 1:7 `1.2.3;`
>>> err("print 'ab' * (1/0);")
SemanticError: repeat count too large: inf at 1:19 `;`
>>> err("print 'ab' * 1000000000000000000000000000000;")
SemanticError: repeat count too large: 1000000000000000000000000000000 at 1:45 `;`
>>> err("print " + "(" * 3000 + "1" + ")" * 3000 + ";") # doctest: +ELLIPSIS
ParseError: Nested too deeply at 1:...
>>> err("print " + "- " * 3000 + "1;") # doctest: +ELLIPSIS
ParseError: Nested too deeply at 1:...
>>> err("{" * 3000 + "}" * 3000) # doctest: +ELLIPSIS
ParseError: Nested too deeply at 1:...

Host API

>>> o = run("x = 1; print x + 1;")
2
>>> o.error is None, o.scope["x"]
(True, 1.0)
>>> o = run("print y;"); print(o.error)
Unknown variable `y` at 1:7 `y;`
>>> sc = eval_str("x = 'a';"); _ = eval_str("print x * 3;", scope = sc)
aaa
"""                                                             # }}}1

import contextlib, sys

from collections import namedtuple

from . import data as D
from . import misc as M
from . import read as R

def _write(s):
  sys.stdout.write(s)

class Evaluator:                                                # {{{1
  """
  Walks the source text once, computing values while parsing.

  Branches that are not taken are still walked (to move the cursor
  past them), but with suppression > 0: no printing, no assignment,
  no variable lookup and no literal decoding.
  """

  def __init__(self, text, sink = None, scope = None):
    self.reader       = R.Reader(text)
    self.scope        = D.new_scope() if scope is None else scope
    self.sink         = sink or _write
    self.suppression  = 0

  @property
  def effect(self):
    return self.suppression == 0

  @contextlib.contextmanager
  def suppressed(self, on = True):
    if on: self.suppression += 1
    try:
      yield
    finally:
      if on: self.suppression -= 1

  def run(self):
    """Run the program; returns the scope."""
    rd = self.reader; rd.skip_trivia()
    try:
      while rd.kind() != M.UNKNOWN: self.statement()
    except RecursionError:
      raise rd.error(D.ParseError, "Nested too deeply")
    if not rd.at_eof():
      raise rd.error(D.LexicalError, "Invalid input")
    return self.scope

  # === Statements ===

  def statement(self):
    tok = self.reader.tok()
    if   tok == "if"   : self.if_()
    elif tok == "while": self.while_()
    elif tok == "{"    : self.block()
    else:
      self.command(); self.reader.expect(";", "semicolon")

  def if_(self):
    self.reader.bump("if")
    cond = self.expression()
    with self.suppressed(self.effect and not D.truthy(cond)):
      self.block()

  def while_(self):                                             # {{{2
    rd = self.reader; rd.bump("while"); mark = rd.mark()
    while True:
      cond = self.expression()
      if not (self.effect and D.truthy(cond)):
        with self.suppressed(): self.block()
        return
      self.block(); rd.back(mark)
                                                                # }}}2

  def block(self):
    rd = self.reader; rd.expect("{", "left brace")
    while rd.tok() != "}":
      if rd.kind() == M.UNKNOWN:
        raise rd.error(D.ParseError, "Expected a right brace")
      self.statement()
    rd.bump("}")

  def command(self):                                            # {{{2
    rd = self.reader; kind, tok = rd.peek()
    if tok == "print":
      rd.bump(tok); value = self.expression()
      if self.effect: self.sink(D.show(value) + "\n")
    elif kind == M.IDENT:
      rd.bump(tok); rd.expect("=", "`=`"); value = self.expression()
      if self.effect: self.scope[tok] = value
    else:
      raise rd.error(D.ParseError, "Expected a command or assign")
                                                                # }}}2

  # === Expressions ===

  def expression(self, min_bp = 0):                             # {{{2
    """Operator-precedence (Pratt) evaluation."""

    rd, value = self.reader, self.prefix()
    while True:
      tok = rd.tok(); bp = M.INFIX_PREC.get(tok)
      if bp is None or bp < min_bp: break
      if (tok == "&&" and not D.truthy(value)) or \
         (tok == "||" and D.truthy(value)):
        rd.bump(tok)
        with self.suppressed(): self.expression(bp + 1)
        continue
      op = D.BINARY_OPS.get(tok)
      if op is None: raise rd.error(D.ParseError, "Invalid operator")
      rd.bump(tok); rhs = self.expression(bp + 1)
      if self.effect:
        try:
          value = op(value, rhs)
        except D.OperandError as e:
          raise rd.error(D.SemanticError, str(e))
    return value
                                                                # }}}2

  def prefix(self):                                             # {{{2
    rd, tok = self.reader, self.reader.tok()
    if tok in ("-", "!"):
      rd.bump(tok); value = self.expression(M.PREFIX_BP)
      if not self.effect: return None
      return D.neg(value) if tok == "-" else D.not_(value)
    if tok == "(":
      rd.bump(tok); value = self.expression(M.GROUP_BP)
      rd.expect(")", "close parentheses")
      return value
    return self.atom()
                                                                # }}}2

  def atom(self):                                               # {{{2
    rd = self.reader; kind, tok = rd.peek()
    if kind not in (M.IDENT, M.NUMBER, M.STRING):
      raise rd.error(D.ParseError, "Invalid expression")
    if not self.effect:
      value = None
    elif kind == M.IDENT:
      if tok not in self.scope:
        raise rd.error(D.SemanticError,
                       "Unknown variable `{}`".format(tok))
      value = self.scope[tok]
    else:
      value = rd.literal()
    rd.bump(tok)
    return value
                                                                # }}}2
                                                                # }}}1

class Outcome(namedtuple("Outcome", "scope error".split())):
  """Result of run(); error is None on success."""

def eval_str(s, sink = None, scope = None):
  """Evaluate string; returns the scope."""
  return Evaluator(s, sink, scope).run()

def eval_stream(s, sink = None, scope = None):
  """Evaluate stream contents."""
  return eval_str("".join(s), sink, scope)

def eval_file(name, sink = None, scope = None):
  """Evaluate file contents."""
  with open(name, encoding = "utf-8") as f:
    return eval_stream(f, sink, scope)

def run(s, sink = None, scope = None):
  """Evaluate string; returns an Outcome instead of raising."""
  ev = Evaluator(s, sink, scope)
  try:
    ev.run()
  except D.ScriptError as e:
    return Outcome(ev.scope, e)
  return Outcome(ev.scope, None)

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
