"""Source-level lana: tokens, the parser, and the expressions it produces. Nothing here evaluates anything."""
