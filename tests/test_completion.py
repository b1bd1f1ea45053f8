"""Tests for shell shim generation."""

from pathlib import Path

from lium_completion.cli.completion import (
    END_MARKER,
    START_MARKER,
    get_bash_completion,
    get_zsh_completion,
    source_block,
)


class TestBashCompletion:
    """Tests for the Bash shim."""

    def test_bash_completion_generated(self):
        """Test that the Bash shim defines and registers _lium."""
        script = get_bash_completion()
        assert "_lium()" in script
        assert "complete -F _lium lium" in script

    def test_bash_completion_calls_helper(self):
        """Test that the shim forwards COMP_CWORD and COMP_WORDS."""
        script = get_bash_completion()
        assert 'complete --cword "${COMP_CWORD}" -- "${COMP_WORDS[@]}"' in script
        assert "2>/dev/null" in script

    def test_bash_completion_splits_on_newlines(self):
        """Test that candidates with spaces survive word splitting."""
        script = get_bash_completion()
        assert "local IFS=$'\\n'" in script
        assert "COMPREPLY=(" in script

    def test_custom_helper(self):
        script = get_bash_completion("/opt/lium/bin/lium-complete")
        assert "/opt/lium/bin/lium-complete complete" in script

    def test_no_format_leftovers(self):
        script = get_bash_completion()
        assert "{helper}" not in script
        assert "{{" not in script


class TestZshCompletion:
    """Tests for the Zsh shim."""

    def test_zsh_loads_bashcompinit(self):
        script = get_zsh_completion()
        assert "autoload -U +X bashcompinit && bashcompinit" in script
        assert script.index("bashcompinit") < script.index("complete -F _lium lium")

    def test_zsh_has_single_shebang(self):
        script = get_zsh_completion()
        assert script.startswith("#!/bin/zsh")
        assert "#!/bin/bash" not in script


class TestCompletionScriptFormat:
    """Tests for completion script format and structure."""

    def test_scripts_are_stripped(self):
        for script in (get_bash_completion(), get_zsh_completion()):
            assert not script.startswith("\n")
            assert not script.endswith("\n")

    def test_scripts_are_different(self):
        assert get_bash_completion() != get_zsh_completion()

    def test_source_block(self):
        block = source_block(Path("/home/me/.lium/lium.bash"))
        assert block == f"{START_MARKER}\n. /home/me/.lium/lium.bash\n{END_MARKER}\n"
