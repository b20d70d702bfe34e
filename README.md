# tahu

The front end of a compiler for the Tahu language. It has source
positions and spans, a lexer that turns Tahu source into tokens, the
operator enumerations used in expressions, and diagnostics that can be
printed for a terminal, as compact one-line messages, or as JSON.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Tokenizing source

```python
from tahu.context import DiagnosticContext
from tahu.reporter import DiagnosticReporter
from tahu.lexer import tokenize
from tahu.terminal import stderr_emitter

context = DiagnosticContext()
source = 'var greeting = "Hello {name}!"\n'
file_id = context.add_file("hello.tahu", source)

reporter = DiagnosticReporter()
result = tokenize(source, file_id, reporter)

for token in result.tokens:
    print(token.kind, repr(token.lexeme), token.value)

if reporter.has_errors():
    emitter = stderr_emitter()
    reporter.emit_all(emitter, context)
    emitter.emit_summary(reporter)
```

`tokenize` returns a `LexerResult` with the list of tokens, which always
ends with an `EOF` token, and a `has_errors` flag. Errors in the source
do not stop the lexer: each one is reported to the `DiagnosticReporter`
as a `Diagnostic`, the offending character is skipped, and lexing goes on.
If no reporter is passed, a fresh one is used.

Each `Token` (in `tahu.tokens`) has a `kind` from the `TokenKind` enum, a
`span`, a `file_id`, its `lexeme`, and a `value`:

- for `TokenKind.LITERAL`, a `Literal` wrapping a `str`, an `int` (which
  must fit in 64 bits), a `float` or a `bool`;
- for `TokenKind.TEMPLATE_STRING`, a tuple of `TemplateText`,
  `TemplateExpression` and `EscapedBrace` parts;
- for every other kind, `None`.

Keywords such as `fn`, `var`, `val`, `class`, `return` and the type names
are told apart from identifiers by `keyword_kind`. The words `true` and
`false` become boolean literals.

Integer literals may be written in decimal, binary (`0b`), octal (`0o`)
or hexadecimal (`0x`). A `.` belongs to a number only when a digit
follows it, so `1..5` lexes as `1`, a range and `5`. Double-quoted strings
that contain `{...}` become template strings. Each interpolated expression
is tokenized by a lexer of its own, and `{{` and `}}` stand for single
braces. Single-quoted strings resolve escapes, including `\u{XXXX}`, and
may not span lines.

Lexical errors are subclasses of `tahu.lexer_errors.LexerError`, for
example `UnterminatedString`, `InvalidEscapeSequence` or
`IntegerOverflow`. Each one turns itself into a diagnostic with
`to_diagnostic(span)`.

## Diagnostics

A `Diagnostic` is built step by step. Each `with_*` method returns an
updated copy:

```python
from tahu.diagnostic import Diagnostic
from tahu.span import Position, Span
from tahu.suggestion import Suggestion

span = Span(Position(1, 16, 15), Position(1, 22, 21), file_id)
diagnostic = (
    Diagnostic.error("Unterminated string")
    .with_span(span)
    .with_suggestion(Suggestion.insert_after(span, "Add closing quote", '"'))
    .with_note("String literals must be closed with a matching quote")
)
```

`DiagnosticReporter` collects diagnostics, 1000 by default, and counts
errors, warnings and infos. `Severity` orders the levels from `HELP` to
`FATAL`.

There are three emitters, all subclasses of `tahu.emitter.Emitter`:

- `tahu.terminal.TerminalEmitter`: a source snippet with the span
  underlined, plus related locations, notes and help lines, with colours
  if asked for. `stderr_emitter()` writes to standard error and uses
  colours when it is a terminal.
- `tahu.emitter.CompactEmitter`: one `path:line:column: [severity]: message`
  line for each diagnostic.
- `tahu.json_emitter.JsonEmitter`: collects diagnostics and writes them as
  one JSON document with a summary when `emit_summary` is called.

## Operators

`tahu.ops` defines `BinaryOp`, `AssignmentOp` and `UnaryOp`. Each member
knows its source `symbol`. A compound assignment gives the binary
operator it applies through `binary_op`, and `UnaryOp.is_postfix` tells
`i++` and `i--` apart from their prefix forms.

## Command line

```
tahuc
```

runs the compiler driver and prints how long it took.

## What it does not do

The package stops at tokens. It has no parser and no syntax tree nodes,
so it does not check grammar or build a program structure. The `tahuc`
command reads no source files: it runs the driver and reports its timing.