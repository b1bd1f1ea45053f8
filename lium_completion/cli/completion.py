"Shell shim scripts that hand lium completion requests to lium-complete"

from pathlib import Path

HELPER_COMMAND = "lium-complete"

SHIM_FILENAME = "lium.bash"

START_MARKER = "# >>> LIUM COMPLETION START >>>"
END_MARKER = "# <<< LIUM COMPLETION END <<<"

BASH_COMPLETION = r"""#!/bin/bash

# Bash completion for lium
# Candidates are computed by {helper}, which reads lium's own --help output
# and list subcommands. Errors are dropped so a broken lium never disturbs
# the prompt.

_lium() {{
    local IFS=$'\n'
    COMPREPLY=($({helper} complete --cword "${{COMP_CWORD}}" -- "${{COMP_WORDS[@]}}" 2>/dev/null))
}}

complete -F _lium lium
"""

ZSH_PREAMBLE = r"""#!/bin/zsh

# Zsh completion for lium, through the bash completion compatibility layer
autoload -U +X compinit && compinit
autoload -U +X bashcompinit && bashcompinit
"""

ZSH_RC_LINES = [
    "autoload -U +X compinit && compinit",
    "autoload -U +X bashcompinit && bashcompinit",
    "source ~/.bash_completion",
]


def get_bash_completion(helper: str = HELPER_COMMAND) -> str:
    """Return bash completion script"""
    return BASH_COMPLETION.format(helper=helper).strip()


def get_zsh_completion(helper: str = HELPER_COMMAND) -> str:
    """Return zsh completion script"""
    bash_body = get_bash_completion(helper).replace("#!/bin/bash\n", "", 1)
    return f"{ZSH_PREAMBLE}\n{bash_body}".strip()


def source_block(shim_path: Path) -> str:
    """Marked block that sources the shim from ~/.bash_completion"""
    return f"{START_MARKER}\n. {shim_path}\n{END_MARKER}\n"
