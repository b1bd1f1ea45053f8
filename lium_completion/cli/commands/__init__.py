from .complete import complete_command
from .install import install_command
from .script import script_command
from .simulate import simulate_command

__all__ = [
    "complete_command",
    "script_command",
    "install_command",
    "simulate_command",
]
