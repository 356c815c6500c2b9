""" Test cases for the closed-form κ-Kohler functions.

The reference scenarios use the default constants (sigma = 0.0728 N/m,
Mw = 0.018 kg/mol, R = 8.314 J/mol/K, T = 298.15 K, rho_w = 1000 kg/m^3).

"""
import unittest

import numpy as np
from numpy.testing import assert_allclose

from . import prod_to_array
from ..constants import DEFAULT_CONSTANTS, KohlerConstants
from ..thermo import *
from ..util import DomainError


class TestConstants(unittest.TestCase):
    def test_kelvin_coefficient(self):
        assert_allclose(DEFAULT_CONSTANTS.A, 2.1146e-9, rtol=1e-3)

    def test_overrides(self):
        cold = KohlerConstants(T=273.15)
        self.assertEqual(cold.sigma_w, DEFAULT_CONSTANTS.sigma_w)
        self.assertEqual(DEFAULT_CONSTANTS.T, 298.15)
        assert_allclose(cold.A, DEFAULT_CONSTANTS.A * 298.15 / 273.15)

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            DEFAULT_CONSTANTS.T = 273.15


class TestKohlerCurve(unittest.TestCase):
    def test_zero_at_dry_diameter(self):
        D = 1e-7
        assert_allclose(saturation_ratio(D, D, 0.5), 0.0, atol=1e-12)

    def test_large_droplet_limit(self):
        S = saturation_ratio(1e-2, 1e-7, 0.5)
        assert_allclose(S, 1.0, atol=1e-6)

    def test_single_peak(self):
        Ds = np.logspace(-1, 1, 400)  # micrometers
        ss = equilibrium_supersaturation(Ds, 0.1, 0.25)
        i_max = np.argmax(ss)
        self.assertTrue(0 < i_max < len(Ds) - 1)
        self.assertTrue(np.all(np.diff(ss[: i_max + 1]) > 0))
        self.assertTrue(np.all(np.diff(ss[i_max:]) < 0))


class TestClosedForms(unittest.TestCase):
    def setUp(self):
        self.diameters = np.logspace(-2, 0, 5)  # micrometers
        self.kappas = np.logspace(-2, 0.1, 5)

    def test_supersaturation_scenario(self):
        s = critical_supersaturation(0.10, 0.25)
        assert_allclose(s, 0.236, atol=0.01)

    def test_diameter_scenario(self):
        D = critical_diameter(0.3, 0.25)
        assert_allclose(D, 0.086, atol=0.005)

    def test_kappa_scenario(self):
        kappa = critical_kappa(0.3, 0.10)
        assert_allclose(kappa, 0.156, atol=0.01)

    def test_diameter_round_trip(self):
        for D, kappa in prod_to_array(self.diameters, self.kappas):
            s = critical_supersaturation(D, kappa)
            assert_allclose(critical_diameter(s, kappa), D, rtol=1e-10)

    def test_kappa_round_trip(self):
        for D, kappa in prod_to_array(self.diameters, self.kappas):
            s = critical_supersaturation(D, kappa)
            assert_allclose(critical_kappa(s, D), kappa, rtol=1e-10)

    def test_monotonic_in_diameter(self):
        ss = [critical_supersaturation(D, 0.3) for D in np.logspace(-2, 0, 50)]
        self.assertTrue(np.all(np.diff(ss) < 0))

    def test_temperature_sensitivity(self):
        cold = KohlerConstants(T=273.15)
        self.assertGreater(
            critical_supersaturation(0.1, 0.25, cold), critical_supersaturation(0.1, 0.25)
        )

    def test_kappa_limit(self):
        for kappa in [0.0, -0.1, 1e-300, 1e-320]:
            with self.assertRaises(DomainError):
                critical_supersaturation(0.1, kappa)

    def test_bad_diameter(self):
        for D in [0.0, -0.1, np.inf, np.nan]:
            with self.assertRaises(DomainError):
                critical_supersaturation(D, 0.25)
            with self.assertRaises(DomainError):
                critical_kappa(0.3, D)

    def test_bad_supersaturation(self):
        for s in [0.0, -50.0, -100.0, -150.0, np.nan]:
            with self.assertRaises(DomainError):
                critical_diameter(s, 0.25)
            with self.assertRaises(DomainError):
                critical_kappa(s, 0.1)

    def test_not_a_number(self):
        for s in ["lots", "0.3", b"0.3", True, np.bool_(True)]:
            with self.assertRaises(DomainError):
                critical_diameter(s, 0.25)
        for kappa in ["0.25", True, False]:
            with self.assertRaises(DomainError):
                critical_supersaturation(0.1, kappa)

    def test_no_kelvin_term(self):
        for constants in [KohlerConstants(sigma_w=0.0), KohlerConstants(sigma_w=-0.07)]:
            with self.assertRaises(DomainError):
                critical_supersaturation(0.1, 0.25, constants)
            with self.assertRaises(DomainError):
                critical_diameter(0.3, 0.25, constants)
            with self.assertRaises(DomainError):
                critical_kappa(0.3, 0.1, constants)


if __name__ == "__main__":
    unittest.main()
