import os
import subprocess
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"


def test_core_imports_without_plotly():
    """Importing freqdist and its algorithms must not pull plotly into sys.modules.

    Run in a fresh interpreter so modules imported by other tests don't count.
    """
    code = (
        "import sys\n"
        "import freqdist\n"
        "from freqdist.algorithms import classify, ogive, polygon\n"
        "assert classify is not None and ogive is not None and polygon is not None\n"
        "assert not any(k.startswith('plotly') for k in sys.modules), 'plotly imported'\n"
    )
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(SRC_DIR), env.get("PYTHONPATH")) if p)
    result = subprocess.run([sys.executable, "-c", code], env=env, capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
