"""
vjson demonstration script.
"""

import vjson


def main():
    print("vjson - Flat JSON Object Demo")
    print("=" * 40)

    examples = [
        ('{"a":1,"b":true,"s":"hi"}', "Mixed scalars"),
        ('{\n  "name": "sensor",\n  "rate": 50,\n}', "Whitespace and trailing comma"),
        ('{"a":1,"a":2}', "Duplicate keys"),
        ('{"a":1, b:2, "c":3}', "Unquoted key (scan stops)"),
        ('{"a":{"b":1},"c":2}', "Nested object (truncated)"),
        ("not an object", "Not an object"),
    ]

    for i, (text, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {text!r}")

        result = vjson.parse_with_status(text)
        print(f"Pairs:  {result.container.items()}")
        print(f"Output: {vjson.to_string(result.container)}")
        print(f"Valid:  {result.valid}")
        for issue in result.issues:
            print(f"Issue:  {issue}")

    print("\nTyped reads")
    obj = vjson.parse('{"count": 42, "on": true, "label": "x"}')
    print(f"get_number('count') = {obj.get_number('count')}")
    print(f"get_boolean('on')   = {obj.get_boolean('on')}")
    print(f"get_number('label') = {obj.get_number('label')}")


if __name__ == "__main__":
    main()
