"""
Shared pytest fixtures for lium-completion tests.

The lium tool is never run for real: ``fake_lium`` patches ``subprocess.run``
in the client module and answers from a table of canned outputs keyed by the
arguments after the program name.
"""

import subprocess
from typing import Dict, List, Tuple, Union
from unittest.mock import patch

import pytest

# =============================================================================
# Canned lium output
# =============================================================================

LIUM_HELP = """\
Usage: lium <command> [<args>]

lium: a tool for ChromeOS developers

Options:
  --help            display usage information

Commands:
  dut               DUT (Device Under Test) management
  servo             control Servo
  tast              Tast test framework
  flash             flash an image
"""

DUT_HELP = """\
Usage: lium dut <command> [<args>]

DUT (Device Under Test) management

Options:
  --help            display usage information

Commands:
  list              list DUTs
  do                run an action on a DUT
  shell             run a shell on a DUT
"""

DUT_DO_HELP = """\
Usage: lium dut do --dut <dut> [<actions...>]

run an action on a DUT

Positional Arguments:
  actions           actions to do

Options:
  --dut             DUT identifier (e.g. 127.0.0.1, localhost:2222)
  -v, --verbose     print verbose logs
  --help            display usage information
"""

TAST_RUN_HELP = """\
Usage: lium tast run [<tests...>] [--dut <dut>] [--repo <repo>]

run Tast tests

Positional Arguments:
  tests             test name or pattern

Options:
  --dut             DUT to run tests on
  --repo            target cros repo dir
  --help            display usage information
"""

SETUP_DEPLOY_HELP = """\
Usage: lium deploy [<files...>] --dut <dut>

push files to a DUT

Positional Arguments:
  files             files to push

Options:
  --dut             target DUT
  --help            display usage information
"""

DUT_IDS = "ROOT_ABCDEF\nROOT_ABC123\nKEY_ZZZ\n"
DUT_ACTIONS = "reboot\nlogin\nsetup_dev_environment\n"
TAST_CACHED = "tast.Boot,passed\ntast.Login,failed\nmeta.RemotePass,passed\n"
SERVO_SERIALS = "C1903101\tservo_v4\nC2101202\tservo_v4p1\n"

DEFAULT_RESPONSES = {
    ("--help",): LIUM_HELP,
    ("dut", "--help"): DUT_HELP,
    ("dut", "do", "--help"): DUT_DO_HELP,
    ("tast", "run", "--help"): TAST_RUN_HELP,
    ("deploy", "--help"): SETUP_DEPLOY_HELP,
    ("dut", "list", "--ids"): DUT_IDS,
    ("dut", "do", "--list-actions"): DUT_ACTIONS,
    ("tast", "list", "--cached"): TAST_CACHED,
    ("servo", "list", "--serials"): SERVO_SERIALS,
}

Response = Union[str, Tuple[int, str], BaseException]


class FakeLium:
    """Stands in for subprocess.run and records every command line"""

    def __init__(self, responses: Dict[Tuple[str, ...], Response]):
        self.responses = dict(responses)
        self.calls: List[List[str]] = []

    def __call__(self, argv, **kwargs):
        argv = list(argv)
        self.calls.append(argv)
        response = self.responses.get(tuple(argv[1:]))

        if isinstance(response, BaseException):
            raise response
        if response is None:
            return subprocess.CompletedProcess(argv, 1, stdout="")
        if isinstance(response, tuple):
            returncode, stdout = response
            return subprocess.CompletedProcess(argv, returncode, stdout=stdout)
        return subprocess.CompletedProcess(argv, 0, stdout=response)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def fake_lium():
    """Patch subprocess.run for the lium client with canned responses."""
    fake = FakeLium(DEFAULT_RESPONSES)
    with patch("lium_completion.core.lium_client.subprocess.run", side_effect=fake):
        yield fake


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point HOME at an empty temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside a directory with a small tree of files."""
    root = tmp_path / "work"
    root.mkdir()
    (root / "chromiumos").mkdir()
    (root / "chromiumos" / "src").mkdir()
    (root / "chromiumos" / "chroot").mkdir()
    (root / "images").mkdir()
    (root / "images" / "test.bin").write_text("x")
    (root / "notes.txt").write_text("notes")
    monkeypatch.chdir(root)
    return root
