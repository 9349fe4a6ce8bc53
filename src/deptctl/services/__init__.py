"""Service layer — parser, reactor, and the interpreter that drives them."""
