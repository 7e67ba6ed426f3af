import json

import pytest

import json_validator as jv

# Inputs on which the standard library decoder is strict. NaN and Infinity
# are left out: json.loads takes them, RFC 8259 does not.
CASES = [
    # accepted
    "{}", "[]", '""', "0", "-0", "0.0", "-0.0e-0", "1E+2", "123e45", "[1e1, 0.1e1, -1]",
    '{"a":{"b":{"c":[[[null]]]}}}', ' \t\r\n[ 1 , 2 ]\r\n ', '{"":""}', '{"a":1,"a":2}',
    '"\\u0000"', '"\\uDFAA\\uD834"', '"\\/\\b"', '"\x7f  "', '"\U0001F600"',
    "[true,false,null]", '[[], {}, "", 0]', "[ ]",
    # rejected
    "", " ", "[", "]", "{", "}", "[1,]", "[,1]", "[1,,2]", '{"a":1,}', '{,"a":1}',
    '{"a"}', '{"a":}', '{"a" "b"}', "{1:2}", "{'a':1}", "['a']", "[1 2]", "[1]]", "[[1]",
    "01", "-01", "00", "1.", ".1", "-", "+1", "1e", "1e+", "1.e1", "0x1", "1_000",
    "- 1", "2.", "[1.]", "[-]", '"abc', '"\\"', '"\\a"', '"\\u12"', '"\\u12G4"',
    '"\t"', '"\n"', '"\x00"', "tru", "True", "nul", "nulll", "[truex]", "falsee",
    "1 2", "{} {}", '"a" "b"', "\ufeff{}", "\x0c[]", "/* c */ {}", "[1]#",
]


def _reference_accepts(text):
    def _reject_constant(name):
        raise ValueError(name)

    try:
        json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return False
    return True


@pytest.mark.parametrize("text", CASES)
def test_agrees_with_stdlib_decoder(text):
    assert bool(jv.validate(text)) == _reference_accepts(text), repr(text)
