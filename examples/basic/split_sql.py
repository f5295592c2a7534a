"""Split a SQL fragment on operators, switching modes inside quotes."""

from stringscanner import DelimiterSet, Scanner

code = DelimiterSet.of(" ", "=", "<>", "<", "<=", ",", "'")
quoted = DelimiterSet.of("''", "'")

scanner = Scanner.from_string("name <> 'O''Brien', age<=42")
delims = code
while not (token := scanner.read(delims)).is_eof:
    print(f"{token.location}\t{token.type.name:<9}\t{token.value!r}")
    if token.value == "'":
        delims = quoted if delims is code else code
