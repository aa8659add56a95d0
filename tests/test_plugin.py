import json

import pytest

from cybergod.plugin import execute_plugin, get_available_plugins


def test_get_available_plugins_trims_and_skips_blanks(tmp_path):
    listing = tmp_path / "cybergod.plugins"
    listing.write_text("  first.py  \n\n\tsecond.py\n   \n")
    assert get_available_plugins(listing) == ["first.py", "second.py"]


def test_get_available_plugins_missing_list(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_available_plugins(tmp_path / "cybergod.plugins")


def test_execute_plugin_runs_script_with_arguments(tmp_path):
    out = tmp_path / "out.json"
    script = tmp_path / "plugin.py"
    script.write_text(
        "import json, sys\n"
        f"open({str(out)!r}, 'w').write(json.dumps(sys.argv[1:]))\n"
    )
    assert execute_plugin(script, ["alpha", "beta"]) is True
    assert json.loads(out.read_text()) == ["alpha", "beta"]


def test_execute_plugin_missing_script(tmp_path):
    assert execute_plugin(tmp_path / "Adder.py") is False