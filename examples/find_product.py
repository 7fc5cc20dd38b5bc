"""
Product lookup: turning a found/not-found search into two responses without None checks.

Run: python examples/find_product.py
"""
from optionpy import ConsoleLogger, first_or_none, set_logger


def all_products():
    yield "Computer"
    yield "Speaker"
    yield "Laptop"
    yield "Headphones"


def ok(body):
    return {"status": 200, "body": body}


def not_found():
    return {"status": 404}


def handle(name: str):
    return (
        first_or_none(all_products(), lambda p: p == name)
        .log(f"lookup {name}")
        .map(lambda p: {"name": p})
        .match(ok, not_found)
    )


def main():
    # Show the lookup trace on stderr
    set_logger(ConsoleLogger(name="find_product", level="DEBUG"))

    for name in ("Speaker", "NAS"):
        print(name, "=>", handle(name))

    missing = first_or_none(all_products(), lambda p: p == "NAS").get_or_else("Not Found!")
    print("NAS =>", missing)  # Not Found!


if __name__ == "__main__":
    main()
