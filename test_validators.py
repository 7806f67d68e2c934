"""
身份证号码解析器测试
- 18位/15位解析
- 错误分类 (长度, 本体, 校验位, 出生日期)
- 性别奇偶规则
- 校验码 / validate_full / 15→18 升级
"""
import logging
from datetime import date

import pytest

from identity import (
    BitType,
    IdentityError,
    IdentityValidator,
    InvalidBirthdayError,
    InvalidBodyError,
    InvalidCheckDigitError,
    InvalidLengthError,
    Sex,
    parse,
)


@pytest.fixture
def validator():
    return IdentityValidator()


def test_parse_18_bit_scenario(validator):
    record = validator.parse("110101199003075170")
    
    assert record.bit_type == BitType.BIT18
    assert record.province == "11"
    assert record.city == "01"
    assert record.area == "01"
    assert record.birthday == "19900307"
    assert record.birthday_date == date(1990, 3, 7)
    assert record.sequence_code == "517"
    assert record.verify_code == "0"
    assert record.sex == Sex.MALE
    assert record.province_name == "北京市"


def test_parse_18_bit_female_with_x():
    record = parse("11010519491231002X")
    
    assert record.birthday == "19491231"
    assert record.sequence_code == "002"
    assert record.verify_code == "X"
    assert record.sex == Sex.FEMALE


def test_parse_preserves_lowercase_verify_code():
    record = parse("11010519491231002x")
    assert record.verify_code == "x"


def test_parse_15_bit():
    record = parse("130503670401002")
    
    assert record.bit_type == BitType.BIT15
    assert record.province == "13"
    assert record.city == "05"
    assert record.area == "03"
    assert record.birthday == "19670401"
    assert record.birthday_date == date(1967, 4, 1)
    assert record.sequence_code == "002"
    assert record.verify_code == ""
    assert record.sex == Sex.FEMALE
    assert record.province_name == "河北省"


@pytest.mark.parametrize("digit", "0123456789")
def test_sex_follows_third_sequence_digit_parity(digit):
    record = parse("11010119900307" + "51" + digit + "0")
    
    assert record.sequence_code[2] == digit
    assert (record.sex == Sex.MALE) == (int(digit) % 2 == 1)


@pytest.mark.parametrize("value", [
    "",
    "1",
    "11010119900307",
    "1101011990030751",
    "1101011990030751701",
    "110101199003075170110",
])
def test_invalid_length(value):
    with pytest.raises(InvalidLengthError):
        parse(value)


def test_invalid_body_18_bit():
    with pytest.raises(InvalidBodyError):
        parse("1101011990030A5170")


def test_invalid_body_15_bit():
    with pytest.raises(InvalidBodyError):
        parse("13050367040100X")


def test_invalid_body_rejects_non_ascii_digits():
    # 全角数字
    with pytest.raises(InvalidBodyError):
        parse("１１" + "0101199003075170")


def test_invalid_body_rejects_whitespace():
    with pytest.raises(InvalidBodyError):
        parse(" 10101199003075170")


def test_invalid_check_digit():
    with pytest.raises(InvalidCheckDigitError):
        parse("11010119900307517Y")


def test_body_checked_before_check_digit():
    with pytest.raises(InvalidBodyError):
        parse("1101011990030A517Y")


def test_check_digit_checked_before_birthday():
    with pytest.raises(InvalidCheckDigitError):
        parse("11010120230230517Y")


def test_invalid_birthday_feb_30():
    with pytest.raises(InvalidBirthdayError) as exc_info:
        parse("110101202302305170")
    
    assert exc_info.value.birthday == "20230230"
    assert exc_info.value.value == "110101202302305170"
    assert "20230230" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_invalid_birthday_month_13_15_bit():
    with pytest.raises(InvalidBirthdayError) as exc_info:
        parse("110101901301517")
    
    assert exc_info.value.birthday == "19901301"


def test_leap_year_birthday():
    assert parse("110101200002295178").birthday_date == date(2000, 2, 29)
    
    with pytest.raises(InvalidBirthdayError):
        parse("110101190002295178")
    
    # 15位固定 1900年代, 1900年非闰年
    with pytest.raises(InvalidBirthdayError):
        parse("110101000229517")


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse("123")
    
    assert issubclass(IdentityError, ValueError)
    for error_type in (InvalidLengthError, InvalidBodyError,
                       InvalidCheckDigitError, InvalidBirthdayError):
        assert issubclass(error_type, IdentityError)


def test_parse_failure_logs_masked_value(caplog):
    value = "1101011990030A5170"
    caplog.set_level(logging.DEBUG, logger="IdentityParser")
    
    with pytest.raises(InvalidBodyError):
        parse(value)
    
    assert "1101**********5170" in caplog.text
    assert value not in caplog.text


def test_validate(validator):
    assert validator.validate("110101199003075170") is True
    assert validator.validate("130503670401002") is True
    assert validator.validate("110101202302305170") is False
    assert validator.validate("abc") is False


def test_get_birth_date(validator):
    assert validator.get_birth_date("130503670401002") == date(1967, 4, 1)
    
    with pytest.raises(InvalidLengthError):
        validator.get_birth_date("1305")


def test_calculate_verify_code(validator):
    assert validator.calculate_verify_code("11010119900307517") == "0"
    assert validator.calculate_verify_code("11010519491231002") == "X"
    
    with pytest.raises(ValueError):
        validator.calculate_verify_code("1101011990030751")
    with pytest.raises(ValueError):
        validator.calculate_verify_code("1101011990030751A")


def test_verify_checksum(validator):
    assert validator.verify_checksum("110101199003075170") is True
    assert validator.verify_checksum("11010519491231002X") is True
    assert validator.verify_checksum("11010519491231002x") is True
    assert validator.verify_checksum("110101199003075171") is False
    # 15位无校验码
    assert validator.verify_checksum("130503670401002") is False
    assert validator.verify_checksum("1101011990030A5170") is False


def test_parse_does_not_verify_checksum():
    record = parse("110101199003075171")
    assert record.verify_code == "1"


def test_is_test_identity(validator):
    assert validator.is_test_identity("111111111111111111") is True
    assert validator.is_test_identity("123456789012345678") is True
    assert validator.is_test_identity("987654321098765432") is True
    assert validator.is_test_identity("110101199003075170") is False
    assert validator.is_test_identity("1101011990030A5170") is False


def test_validate_full(validator):
    assert validator.validate_full("110101199003075170") == (True, "居民身份证号码")
    assert validator.validate_full("11010519491231002x") == (True, "居民身份证号码")
    assert validator.validate_full("130503670401002") == (True, "居民身份证号码(疑似)")
    # 校验码不符
    assert validator.validate_full("110101199003075171") == (False, "")
    # 格式错误
    assert validator.validate_full("110101202302305170") == (False, "")
    assert validator.validate_full("11010119900307517") == (False, "")
    # 测试号码
    assert validator.validate_full("111111111111111111") == (False, "")


def test_convert_to_18(validator):
    assert validator.convert_to_18("110101900307517") == "110101199003075170"
    assert validator.convert_to_18("11010519491231002x") == "11010519491231002x"
    
    converted = validator.convert_to_18("130503670401002")
    assert len(converted) == 18
    assert validator.verify_checksum(converted) is True
    assert parse(converted).birthday == "19670401"
    
    with pytest.raises(InvalidBirthdayError):
        validator.convert_to_18("110101901301517")
