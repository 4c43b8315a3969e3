"""Namespace for per-provider request handlers; it holds no modules yet."""