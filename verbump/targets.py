"""Files rewritten on every bump, in processing order."""
from typing import Tuple

from verbump.schemas import PatternShape, TargetFile

MANIFESTS = (
    "Cargo.toml",
    "casr/Cargo.toml",
    "libcasr/Cargo.toml",
)

BINARIES = (
    "casr-core",
    "casr-cli",
    "casr-cluster",
    "casr-san",
    "casr-gdb",
    "casr-afl",
    "casr-python",
    "casr-libfuzzer",
)

DEFAULT_TARGETS: Tuple[TargetFile, ...] = tuple(
    [TargetFile(path=path, shape=PatternShape.MANIFEST) for path in MANIFESTS]
    + [TargetFile(path=f"casr/src/bin/{name}.rs", shape=PatternShape.SOURCE) for name in BINARIES]
)
