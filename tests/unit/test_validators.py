"""
Unit tests for vending_machine.domain.validators
"""
import pytest

from vending_machine.domain import validators
from vending_machine.domain.exceptions import InvalidCoinError, ValidationError
from vending_machine.domain.models.role import Role


class TestValidateUsername:
    """Tests for validate_username"""

    @pytest.mark.parametrize(
        "username,valid",
        [
            ("skjdfs", False),
            ("12345678", True),
            ("ksjsksjdsk!", False),
            ("verylongusername", True),
            ("mix@valid.name-", True),
            ("", False),
            ("with space inside", False),
        ],
    )
    def test_username_rules(self, username, valid):
        if valid:
            assert validators.validate_username(username) == username
        else:
            with pytest.raises(ValidationError):
                validators.validate_username(username)


class TestValidatePassword:
    """Tests for validate_password"""

    @pytest.mark.parametrize(
        "password",
        [
            "12short",
            "kasdfjadfjdasfkjakdsf",
            "1233484744",
            "AAAHAHAHAHAA",
            "A678",
            "hajas^&^8*&",
            "123HDhhasdKJJJM",
            "mhGP*&UksdfLK",
            "    ksjE#2j    ",
        ],
    )
    def test_weak_passwords_rejected(self, password):
        with pytest.raises(ValidationError):
            validators.validate_password(password)

    @pytest.mark.parametrize("password", ["mhG2P*&UksdfLK", "kjadf SKS k& k7(*  "])
    def test_strong_passwords_accepted(self, password):
        assert validators.validate_password(password) == password

    def test_length_checked_first(self):
        with pytest.raises(ValidationError, match="minimum password length is 8"):
            validators.validate_password("aB1!")

    def test_missing_symbol_message(self):
        with pytest.raises(ValidationError, match="non-alphanumerical"):
            validators.validate_password("abcDEF123")


class TestValidateDeposit:
    """Tests for validate_deposit"""

    @pytest.mark.parametrize("deposit", [0, 5, 10, 20, 50, 100, 1000])
    def test_valid_deposits(self, deposit):
        assert validators.validate_deposit(deposit) == deposit

    @pytest.mark.parametrize("deposit", [-5, 1, 7, 33, 101, True, 5.0, "10"])
    def test_invalid_deposits(self, deposit):
        with pytest.raises(ValidationError):
            validators.validate_deposit(deposit)


class TestValidateRole:
    """Tests for validate_role"""

    @pytest.mark.parametrize(
        "role,expected",
        [("BUYER", Role.BUYER), ("SELLER", Role.SELLER), ("ADMIN", Role.ADMIN), (Role.SELLER, Role.SELLER)],
    )
    def test_known_roles(self, role, expected):
        assert validators.validate_role(role) is expected

    @pytest.mark.parametrize("role", ["buyer", "CUSTOMER", "", None])
    def test_unknown_roles(self, role):
        with pytest.raises(ValidationError, match="unrecognized role"):
            validators.validate_role(role)


class TestValidateCost:
    """Tests for validate_cost"""

    @pytest.mark.parametrize("cost", [5, 10, 15, 95, 500])
    def test_valid_costs(self, cost):
        assert validators.validate_cost(cost) == cost

    @pytest.mark.parametrize("cost", [0, -5, 3, 12, False, 10.0])
    def test_invalid_costs(self, cost):
        with pytest.raises(ValidationError):
            validators.validate_cost(cost)


class TestValidateProductName:
    """Tests for validate_product_name"""

    def test_name_is_trimmed(self):
        assert validators.validate_product_name("  Cola  ") == "Cola"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError, match="missing name for product"):
            validators.validate_product_name(name)


class TestValidateAmountAvailable:
    """Tests for validate_amount_available"""

    @pytest.mark.parametrize("amount", [0, 1, 250])
    def test_valid_amounts(self, amount):
        assert validators.validate_amount_available(amount) == amount

    @pytest.mark.parametrize("amount", [-1, 1.5, None])
    def test_invalid_amounts(self, amount):
        with pytest.raises(ValidationError):
            validators.validate_amount_available(amount)


class TestValidateDepositCoin:
    """Tests for validate_deposit_coin"""

    @pytest.mark.parametrize("coin", [5, 10, 20, 50, 100])
    def test_accepted_coins(self, coin):
        assert validators.validate_deposit_coin(coin) == coin

    @pytest.mark.parametrize("coin", [0, 1, 15, 25, 200, -5, 5.0])
    def test_rejected_coins(self, coin):
        with pytest.raises(InvalidCoinError, match="coin value not allowed"):
            validators.validate_deposit_coin(coin)

    def test_invalid_coin_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            validators.validate_deposit_coin(3)


class TestParseDecimal:
    """Tests for parse_decimal"""

    @pytest.mark.parametrize("raw,expected", [("5", 5), ("100", 100), ("-3", -3), ("+4", 4), ("007", 7)])
    def test_ascii_decimals(self, raw, expected):
        assert validators.parse_decimal(raw) == expected

    @pytest.mark.parametrize("raw", ["1_00", " 5", "5 ", "٣", "５", "1e2", "0x10", "", "+", "5\n", None, 5])
    def test_rejected_forms(self, raw):
        assert validators.parse_decimal(raw) is None
