""" Test cases for the YAML namelist front-end.
"""
import os
import tempfile
import unittest
from textwrap import dedent

from numpy.testing import assert_allclose

from ..scripts.run_kohler import read_namelist, run_namelist
from ..thermo import critical_supersaturation
from ..util import KohlerError

NAMELIST = dedent(
    """
    mode: 1
    inputs:
      supersaturation: .nan
      critical_diameter: [0.05, 0.1, 0.2]
      kappa: 0.25
    constants:
      T: 298.15
    """
)


class TestNamelist(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, text):
        fn = os.path.join(self.tmpdir.name, "config.yml")
        with open(fn, "w") as f:
            f.write(text)
        return fn

    def test_run(self):
        y = read_namelist(self._write(NAMELIST))
        df = run_namelist(y)
        self.assertEqual(len(df), 3)
        self.assertTrue((df["status"] == "ok").all())
        assert_allclose(df["value"].iloc[1], critical_supersaturation(0.1, 0.25))

    def test_search_settings(self):
        y = read_namelist(self._write(NAMELIST.replace("mode: 1", "mode: 4")))
        y["search"] = {"maxiter": 3}
        df = run_namelist(y)
        self.assertTrue((df["status"] == "SearchNonConvergenceError").all())

    def test_missing_mode(self):
        with self.assertRaises(KohlerError):
            read_namelist(self._write("inputs: {}\n"))

    def test_bad_overrides(self):
        y = read_namelist(self._write(NAMELIST))
        y["constants"] = {"temperature": 280.0}
        with self.assertRaises(KohlerError):
            run_namelist(y)

        y = read_namelist(self._write(NAMELIST))
        y["inputs"]["dry_diameter"] = 0.1
        with self.assertRaises(KohlerError):
            run_namelist(y)


if __name__ == "__main__":
    unittest.main()
