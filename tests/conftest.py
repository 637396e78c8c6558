"""Pytest configuration and shared fixtures for htmlslim tests."""

import os

import pytest

from htmlslim.config import ENV_PREFIX


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Pure logic tests with no I/O")
    config.addinivalue_line("markers", "integration: Tests that spawn the CLI in a subprocess")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """
    Apply default markers to tests without explicit markers.

    Unmarked tests default to unit.
    """
    for item in items:
        marker_names = [m.name for m in item.iter_markers()]
        if any(m in marker_names for m in ("unit", "integration")):
            continue
        item.add_marker(pytest.mark.unit)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run in an empty directory with no HTMLSLIM_* variables set."""
    monkeypatch.chdir(tmp_path)
    for var in [name for name in os.environ if name.upper().startswith(ENV_PREFIX)]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def sample_page() -> str:
    """A small but realistic page touching every removal category."""
    return """
    <!DOCTYPE html>
    <html lang="en">
    <head>
      <meta charset="utf-8">
      <title>Sample &amp; Test</title>
      <link rel="stylesheet" href="/site.css">
      <link rel="preload" as="script" href="/app.js">
      <link rel="preload" as="style" href="/extra.css">
      <style>
        body { margin: 0; }
      </style>
      <script type="application/ld+json">{"@context": "https://schema.org", "@type": "Thing"}</script>
      <script src="/app.js"></script>
    </head>
    <body class="home" onload="init()">
      <!-- main navigation -->
      <header><nav><a href="/">Home</a></nav></header>
      <main id="app" data-v-1a2b3c>
        <h1 style="color: red">Hello,   world</h1>
        <p onclick="track()">Some    text
           spanning lines.</p>
        <pre>  keep
          this   </pre>
        <template><p>hidden</p></template>
      </main>
      <footer>Footer</footer>
    </body>
    </html>
    """
