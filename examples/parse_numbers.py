"""
Parsing pipeline: parse strings into Options, drop failures, bind and sum.

Run: python examples/parse_numbers.py
"""
from optionpy import NONE, Option, OptionSeq, Some


def parse_integer(item: str) -> Option[int]:
    try:
        return Some(int(item))
    except ValueError:
        return NONE


def main():
    raw = [f"NotNumeric{i}" if i % 10 == 0 else str(i) for i in range(1, 101)]
    parsed = OptionSeq.from_iterable([parse_integer(s) for s in raw])

    print("parsed        =>", parsed.flat_map().count())                    # 90
    print("single digits =>", parsed.filter(lambda n: n < 10).flat_map().count())  # 9
    print("sum of 10//n  =>", sum(parsed.flat_map(lambda n: Some(10 // n)).values()))  # 26
    print("bad input     =>", parse_integer("NotValid").map(lambda i: i * 2).get_or_else(0))  # 0


if __name__ == "__main__":
    main()
