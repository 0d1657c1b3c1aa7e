from __future__ import annotations

import pytest

from fakes import INACTIVE_TEMPLATE, INDEX_TEMPLATE


@pytest.fixture
def site(tmp_path):
    """A working directory with both templates in place."""
    (tmp_path / "templates").mkdir()
    (tmp_path / "templates" / "index.tmpl.md").write_text(INDEX_TEMPLATE, encoding="utf-8")
    (tmp_path / "templates" / "inactive.tmpl.md").write_text(INACTIVE_TEMPLATE, encoding="utf-8")
    return tmp_path
