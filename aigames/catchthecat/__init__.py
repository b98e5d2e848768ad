"""Catch-the-cat: a cat and a catcher play on a staggered hexagonal grid."""