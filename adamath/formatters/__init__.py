from .cli import CliFormatter
