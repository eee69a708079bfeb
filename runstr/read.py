# --                                                            ; {{{1
#
# File        : runstr/read.py
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
Tokenizer: reads one lexeme at a time at a cursor.

Nothing is tokenized up front; the current token is recomputed from
the cursor when asked for (and cached for that position only).

>>> r = Reader("  x = 'a' + 42; // c\n  y=x!=1"); r.skip_trivia()
>>> toks = []
>>> while r.kind() != M.UNKNOWN:
...   toks.append(r.peek()); r.bump(r.tok())
>>> print(" ".join( t.text for t in toks ))
x = 'a' + 42 ; y = x != 1
>>> print(" ".join( t.kind[0] for t in toks ))
i p s p n p i p i p n
>>> r.at_eof()
True
"""                                                             # }}}1

import sys

from collections import namedtuple

import pyparsing as P

from . import data as D
from . import misc as M

class Token(namedtuple("Token", "kind text".split())):
  """Token (kind + lexeme)."""

def _make_lexemes():                                            # {{{1
  r, n = P.Regex, lambda x, name: x.set_name(name)
  ops  = " ".join(M.DOUBLE_OPS + list(M.S_PUNCT))
  return {
    M.IDENT   : n(r(M.RX_IDENT), "identifier"),
    M.NUMBER  : n(r(M.RX_NUMBER), "number"),
    M.PUNCT   : n(P.one_of(ops), "punctuation"),
    M.S_SOFT  : n(r(M.RX_SOFT_STRING), "soft string"),
    M.S_HARD  : n(r(M.RX_HARD_STRING), "hard string"),
  }
                                                                # }}}1

_lexemes = { k: v.leave_whitespace()
             for k, v in _make_lexemes().items() }

class Reader:                                                   # {{{1
  """Source text + cursor."""

  def __init__(self, text):
    self.text, self.pos, self._peeked = text, 0, None

  def at_eof(self):
    return self.pos >= len(self.text)

  def skip_trivia(self):
    self.pos = M.skip_trivia(self.text, self.pos)

  def peek(self):
    """Current token."""
    if self._peeked is None or self._peeked[0] != self.pos:
      self._peeked = (self.pos, self._scan())
    return self._peeked[1]

  def kind(self): return self.peek().kind
  def tok(self) : return self.peek().text

  def _scan(self):
    kind = M.classify(self.text[self.pos:self.pos+1])
    if kind == M.UNKNOWN: return Token(kind, "")
    lex = _lexemes[self.text[self.pos] if kind == M.STRING else kind]
    try:
      end = lex.try_parse(self.text, self.pos)
    except P.ParseException:
      raise self.error(D.LexicalError, "String literal not terminated")
    return Token(kind, self.text[self.pos:end])

  def bump(self, s):
    """Consume s (which must be the current token) + trivia."""
    assert self.text.startswith(s, self.pos)
    self.pos += len(s); self.skip_trivia()

  def expect(self, s, what):
    if self.tok() != s:
      raise self.error(D.ParseError, "Expected a " + what)
    self.bump(s)

  def mark(self):
    return self.pos

  def back(self, mark):
    assert mark <= self.pos
    self.pos = mark

  def literal(self):                                            # {{{2
    r"""
    Decode the current number or string literal.

    >>> Reader("2.5").literal(), Reader("'a\\n'").literal()
    (2.5, 'a\\n')
    >>> Reader(r'"a\tb\"c\\"').literal()
    'a\tb"c\\'
    >>> for s in ["1.2.3", r'"\q"']:
    ...   try: Reader(s).literal()
    ...   except D.LexicalError as e: print(e)
    Invalid number at 1:1 `1.2.3`
    Invalid soft string escape `\q` at 1:1 `"\q"`
    >>> Reader("'a\\'b'").literal(), Reader(r"'a\\'").literal()
    ("a\\'b", 'a\\\\')
    >>> for s in [r"'foo\'", '"abc']:
    ...   try: Reader(s).peek()
    ...   except D.LexicalError as e: print(e)
    String literal not terminated at 1:1 `'foo\'`
    String literal not terminated at 1:1 `"abc`
    """

    kind, tok = self.peek()
    if kind == M.NUMBER:
      try:
        return float(tok)
      except ValueError:
        raise self.error(D.LexicalError, "Invalid number")
    assert kind == M.STRING
    body = tok[1:-1]
    if tok[0] == M.S_HARD: return body
    try:
      return M.unescape(body)
    except ValueError as e:
      raise self.error(D.LexicalError,
                       "Invalid soft string escape `{}`".format(e))
                                                                # }}}2

  def error(self, cls, msg):
    """Error of type cls at the cursor."""
    return cls(msg, P.lineno(self.pos, self.text),
               P.col(self.pos, self.text),
               M.line_rest(self.text, self.pos))
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
