from pathlib import Path

import pytest

ASSEMBLY_INFO = """using System.Reflection;
using System.Runtime.InteropServices;

[assembly: AssemblyTitle("Sample")]
[assembly: ComVisible(false)]
[assembly: AssemblyVersion("1.0.0.0")]
[assembly: AssemblyFileVersion("1.0.0.0")]
"""

VB_ASSEMBLY_INFO = """Imports System.Reflection

<Assembly: AssemblyVersion("1.0.0.0")>
"""


@pytest.fixture
def assembly_info() -> str:
    return ASSEMBLY_INFO


@pytest.fixture
def setup_test_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    root = tmp_path / "solution"
    root.mkdir()
    monkeypatch.chdir(root)

    (root / "AssemblyInfo.cs").write_text(ASSEMBLY_INFO)
    (root / "Program.cs").write_text("class Program { }\n")
    (root / "readme.txt").write_text('[assembly: AssemblyVersion("1.0.0.0")]\n')

    nested = root / "src" / "App" / "Properties"
    nested.mkdir(parents=True)
    (nested / "AssemblyInfo.cs").write_text(ASSEMBLY_INFO)

    vb = root / "src" / "Legacy"
    vb.mkdir(parents=True)
    (vb / "AssemblyInfo.vb").write_text(VB_ASSEMBLY_INFO)

    return root
