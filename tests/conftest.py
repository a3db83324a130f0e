import pytest

from cssforge import BuilderConfig, CssSelectorBuilder


@pytest.fixture
def builder():
    return CssSelectorBuilder()


@pytest.fixture
def strict_builder():
    return CssSelectorBuilder(BuilderConfig(strict_combinators=True))


@pytest.fixture
def table_html():
    return """
    <!DOCTYPE html>
    <html>
    <body>
        <div id="main" class="container draggable">
            <a href="/logo.png" class="thumb">Logo</a>
            <a href="/about">About</a>
        </div>
        <table id="data">
            <tr><td>1</td><td>2</td></tr>
            <tr><td>3</td><td>4</td></tr>
        </table>
        <ul class="menu">
            <li class="item active">Home</li>
            <li class="item">Docs</li>
        </ul>
    </body>
    </html>
    """


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""
    for item in items:
        file_path = str(item.path)

        if '/tests/integration/' in file_path:
            item.add_marker(pytest.mark.integration)
        elif '/tests/unit/' in file_path:
            item.add_marker(pytest.mark.unit)
