"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides the AngularJS playground workspace plus a recording host.
"""

import logging
import os
import sys
from collections.abc import Callable, Generator, Sequence
from pathlib import Path
from typing import Any

import pytest
import structlog

# Insert local src directory at the beginning of sys.path
# This ensures that the local ngjump package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of ngjump modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("ngjump"):
        del sys.modules[module_name]

from ngjump.core.logging import configure_logging  # noqa: E402
from ngjump.host.base import Choice  # noqa: E402
from ngjump.host.workspace import WorkspaceHost  # noqa: E402

APP_JS = """\
// playground/app.js

angular.module('myApp', [])
    .controller('MainController', MainController)
    .service('MyTestService', MyTestService) // registers MyTestService
    .factory('AnotherFactory', AnotherFactory); // registers AnotherFactory

MainController.$inject = ['MyTestService', 'AnotherFactory'];
function MainController(MyTestService, AnotherFactory) {
    const vm = this;
    vm.serviceName = 'MyTestService';
    vm.factoryData = '';

    vm.callService = function() {
        MyTestService.doSomething();
    };

    vm.callFactory = function() {
        vm.factoryData = AnotherFactory.getData();
        alert('Factory data: ' + vm.factoryData);
    };
}
"""

MY_TEST_SERVICE_JS = """\
// services/myTestService.js
// The actual definition of MyTestService lives here
function MyTestService() {
    function doSomething () {
        console.log('MyTestService is doing something from a separate file!');
        alert('Service action from separate file!');
    };

    return {
        doSomething: doSomething,
    }
}
"""


@pytest.fixture(autouse=True)
def _isolated_environment(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Keep user config, env vars and leftover log handlers out of tests."""
    global_config = tmp_path_factory.mktemp("global") / "config.yaml"
    monkeypatch.setattr("ngjump.config.loader.GLOBAL_CONFIG_PATH", global_config)
    for key in list(os.environ):
        if key.upper().startswith("NGJUMP"):
            monkeypatch.delenv(key, raising=False)
    configure_logging(level="WARNING")
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()


@pytest.fixture
def playground(tmp_path: Path) -> Path:
    """AngularJS workspace: app.js wiring plus services/myTestService.js."""
    root = tmp_path / "workspace"
    (root / "playground" / "services").mkdir(parents=True)
    (root / "playground" / "app.js").write_text(APP_JS)
    (root / "playground" / "services" / "myTestService.js").write_text(MY_TEST_SERVICE_JS)
    (root / "node_modules" / "services").mkdir(parents=True)
    (root / "node_modules" / "services" / "myTestService.js").write_text(MY_TEST_SERVICE_JS)
    return root


class RecordingHost(WorkspaceHost):
    """WorkspaceHost that records UI calls instead of talking to a terminal."""

    def __init__(
        self,
        root: Path,
        *,
        pick: Callable[[Sequence[Choice[Any]]], int | None] | None = None,
        fail_reads: set[str] | None = None,
    ) -> None:
        super().__init__(root, interactive=False)
        self._pick = pick
        self._fail_reads = fail_reads or set()
        self.messages: list[str] = []
        self.navigated: list[Any] = []
        self.offered: list[list[Choice[Any]]] = []

    def read_text(self, path: Path) -> str:
        if path.name in self._fail_reads:
            raise OSError(f"cannot read {path}")
        return super().read_text(path)

    def pick_one(self, choices: Sequence[Choice[Any]], *, placeholder: str) -> Any:  # noqa: ARG002
        self.offered.append(list(choices))
        if self._pick is None:
            return None
        index = self._pick(choices)
        return None if index is None else choices[index].payload

    def open_and_select(self, match: Any) -> None:
        self.navigated.append(match)

    def notify(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def recording_host() -> type[RecordingHost]:
    return RecordingHost
