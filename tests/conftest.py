# SmartPy's `sp.add_test()` runs each scenario when its module is executed
# and leaves nothing for pytest to collect, so every `*_tests.py` file is
# collected as one item that executes the module.
import runpy

import pytest


def pytest_collect_file(parent, file_path):
    if file_path.name.endswith("_tests.py"):
        return SmartPyScenarioFile.from_parent(parent, path=file_path)


class SmartPyScenarioFile(pytest.File):
    def collect(self):
        yield SmartPyScenarioItem.from_parent(self, name=self.path.stem)


class SmartPyScenarioItem(pytest.Item):
    def runtest(self):
        runpy.run_path(str(self.path), run_name=self.path.stem)

    def reportinfo(self):
        return self.path, 0, self.name
