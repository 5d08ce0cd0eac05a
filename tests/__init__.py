import pathlib

# Absolute path to the top level directory
PROJECT_ROOT = pathlib.Path(__file__).parent.parent
