import unittest
from decimal import Decimal

from hotel_engine.utils.identifiers import generate_id
from hotel_engine.utils.money import calculate_total, calculate_vat, to_money


class TestMoney(unittest.TestCase):
    def test_to_money_rounds_half_up(self):
        self.assertEqual(to_money(Decimal("50.005")), Decimal("50.01"))
        self.assertEqual(to_money(Decimal("50.004")), Decimal("50.00"))
        self.assertEqual(str(to_money(330)), "330.00")

    def test_to_money_from_float_uses_its_repr(self):
        self.assertEqual(to_money(0.1), Decimal("0.10"))

    def test_vat_and_total(self):
        subtotal = Decimal("300.00")
        self.assertEqual(calculate_vat(subtotal, Decimal("0.10")), Decimal("30.00"))
        self.assertEqual(calculate_total(subtotal, Decimal("0.10")), Decimal("330.00"))
        self.assertEqual(calculate_total(subtotal, Decimal("0")), Decimal("300.00"))

    def test_vat_and_total_are_not_rounded(self):
        subtotal = Decimal("100.01")

        self.assertEqual(calculate_vat(subtotal, Decimal("0.10")), Decimal("10.001"))
        self.assertEqual(calculate_total(subtotal, Decimal("0.10")), Decimal("110.011"))

    def test_generate_id_format(self):
        self.assertRegex(generate_id("INV-"), r"^INV-[0-9A-F]{8}$")
        self.assertNotEqual(generate_id("BK-"), generate_id("BK-"))


if __name__ == "__main__":
    unittest.main()
