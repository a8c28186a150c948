"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages, and
provides builders for SCIP index fixtures.
"""

import sys
from collections.abc import Iterable
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

for module_name in list(sys.modules.keys()):
    if module_name.startswith("apidrift"):
        del sys.modules[module_name]

from apidrift.index import schema  # noqa: E402

MODULE = "github.com/acme/kit"


class ScipBuilder:
    """Builds serialized SCIP indexes the way scip-go lays them out."""

    @staticmethod
    def go_symbol(
        descriptor: str,
        *,
        module: str = MODULE,
        version: str = "v1.0.0",
        package: str | None = None,
    ) -> str:
        """``scip-go gomod <module> <version> `<package>`/<descriptor>``."""
        return f"scip-go gomod {module} {version} `{package or module}`/{descriptor}"

    @staticmethod
    def go_doc(declaration: str, comment: str | None = None) -> list[str]:
        """Documentation blocks as scip-go emits them."""
        blocks = [f"```go\n{declaration}\n```"]
        if comment:
            blocks.append(comment)
        return blocks

    @staticmethod
    def document(
        relative_path: str,
        *,
        occurrences: Iterable[str] = (),
        symbols: Iterable[tuple[str, list[str]]] = (),
    ) -> object:
        doc = schema.Document(relative_path=relative_path, language="go")
        for i, sym in enumerate(occurrences):
            doc.occurrences.add(range=[i, 0, 4], symbol=sym, symbol_roles=0)
        for sym, docs in symbols:
            doc.symbols.add(symbol=sym, documentation=docs)
        return doc

    @staticmethod
    def index(*documents: object, tool: str = "scip-go") -> bytes:
        idx = schema.Index()
        idx.metadata.tool_info.name = tool
        idx.metadata.tool_info.version = "0.1.0"
        idx.metadata.project_root = "file:///src"
        for doc in documents:
            idx.documents.add().CopyFrom(doc)
        return idx.SerializeToString()

    @classmethod
    def dependency(cls, version: str, declarations: dict[str, str]) -> bytes:
        """Dependency index: descriptor -> declaration line, one document."""
        symbols = [
            (cls.go_symbol(descriptor, version=version), cls.go_doc(declaration))
            for descriptor, declaration in declarations.items()
        ]
        return cls.index(cls.document("kit.go", symbols=symbols))

    @classmethod
    def consumer(cls, used_descriptors: Iterable[str], version: str = "v1.0.0") -> bytes:
        """Consumer index referencing the given dependency descriptors."""
        occurrences = [cls.go_symbol(d, version=version) for d in used_descriptors]
        occurrences.append("scip-go gomod example.com/app . `example.com/app`/main().")
        occurrences.append("local 3")
        return cls.index(cls.document("main.go", occurrences=occurrences))


@pytest.fixture
def scip() -> type[ScipBuilder]:
    return ScipBuilder


# Dependency at the version in use
OLD_DECLARATIONS = {
    "F().": "func F(a string) error",
    "G().": "func G()",
    "H().": "func H(x int) int",
    "helper().": "func helper()",
    "Client#Do().": "func (c *Client) Do(req string) error",
    "Unused().": "func Unused()",
}

# Candidate version: F and Client.Do change, G and Unused disappear
NEW_DECLARATIONS = {
    "F().": "func F(a string, b int) error",
    "H().": "func H(x int) int",
    "helper().": "func helper(n int)",
    "Client#Do().": "func (c *Client) Do(ctx context.Context, req string) error",
}

USED = ["F().", "G().", "H().", "helper().", "Client#Do()."]


@pytest.fixture
def upgrade_indexes(scip: type[ScipBuilder]) -> tuple[bytes, bytes, bytes]:
    """(consumer, old dependency, new dependency) index bytes."""
    return (
        scip.consumer(USED),
        scip.dependency("v1.0.0", OLD_DECLARATIONS),
        scip.dependency("v1.1.0", NEW_DECLARATIONS),
    )


@pytest.fixture
def upgrade_files(
    tmp_path: Path, upgrade_indexes: tuple[bytes, bytes, bytes]
) -> tuple[Path, Path, Path]:
    paths = (tmp_path / "app.scip", tmp_path / "old.scip", tmp_path / "new.scip")
    for path, data in zip(paths, upgrade_indexes, strict=True):
        path.write_bytes(data)
    return paths
