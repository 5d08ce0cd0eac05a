"""Built-in commands. Each module `foo.py` provides a tool class named `FooCommand`."""
