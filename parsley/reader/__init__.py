from parsley.reader.parser import TokenStream, lex, parse, read

__all__ = ["TokenStream", "lex", "parse", "read"]
