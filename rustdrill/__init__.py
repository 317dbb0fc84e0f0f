"""Terminal status lines, rust-analyzer project files and worked Python solutions for a Rust exercise course."""

__version__ = "5.2.1"