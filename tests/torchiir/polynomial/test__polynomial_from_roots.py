import torch

from torchiir.polynomial import polynomial_from_roots


class TestPolynomialFromRoots:
    def test_real_roots(self):
        """(x - 1)(x - 2) = 2 - 3x + x^2."""
        p = polynomial_from_roots(torch.tensor([1.0, 2.0]))
        torch.testing.assert_close(p.coeffs, torch.tensor([2.0, -3.0, 1.0]))

    def test_no_roots(self):
        """No roots gives the constant polynomial 1."""
        p = polynomial_from_roots(torch.zeros(0, dtype=torch.float64))
        torch.testing.assert_close(
            p.coeffs, torch.ones(1, dtype=torch.float64)
        )

    def test_conjugate_roots_are_real(self):
        """Conjugate pairs expand to real coefficients."""
        roots = torch.tensor(
            [-1.0 + 1.0j, -1.0 - 1.0j], dtype=torch.complex128
        )
        p = polynomial_from_roots(roots)
        # (x + 1)^2 + 1 = 2 + 2x + x^2
        torch.testing.assert_close(
            p.coeffs.real, torch.tensor([2.0, 2.0, 1.0], dtype=torch.float64)
        )
        assert p.coeffs.imag.abs().max() < 1e-15
