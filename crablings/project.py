"""Generation of the rust-project.json file used by rust-analyzer."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One exercise file as a crate entry."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class RustAnalyzerProject:
    """The content of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [crate.to_dict() for crate in self.crates],
        }

    def add_path(self, path: str | os.PathLike) -> None:
        """Add a crate for the path if it is a .rs file."""
        path = Path(path)
        if path.suffix == ".rs":
            self.crates.append(Crate(root_module=str(path)))

    def exercises_to_json(self, root: str | os.PathLike = "exercises") -> None:
        """Add a crate for every .rs file below root."""
        for path in sorted(Path(root).glob("**/*")):
            self.add_path(path)

    def get_sysroot_src(self) -> None:
        """Find the standard library sources, from RUST_SRC_PATH or rustc."""
        from_env = os.environ.get("RUST_SRC_PATH")
        if from_env is not None:
            self.sysroot_src = from_env
            return

        result = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        )
        text = result.stdout.decode("utf-8", errors="replace")
        parts = text.split()
        toolchain = parts[0] if parts else text

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )

    def write_to_disk(self, path: str | os.PathLike = "./rust-project.json") -> None:
        """Write the project as compact JSON."""
        data = json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
        Path(path).write_bytes(data.encode("utf-8"))