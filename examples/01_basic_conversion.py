"""
Example 01: Basic Conversion

This example demonstrates converting a record to a dict and back with
object_to_map and map_to_object.
"""

from bean_map import map_to_object, object_to_map


class DemoBean:
    """Record following the get/is/set naming convention"""

    def __init__(self):
        self._id = None
        self._name = None

    def getId(self) -> int:
        return self._id

    def setId(self, id: int) -> None:
        self._id = id

    def getName(self) -> str:
        return self._name

    def setName(self, name: str) -> None:
        self._name = name

    def isLongName(self) -> bool:
        return self._name is not None and len(self._name) > 10

    def __repr__(self):
        return f"DemoBean(id={self._id}, name={self._name!r}, longName={self.isLongName()})"


def main():
    print("=== Basic Conversion ===\n")

    # Encode
    bean = DemoBean()
    bean.setId(100)
    bean.setName("AAAAAAAAAAAAAAAAAAA")
    print("1. Record -> dict:")
    print(f"   {object_to_map(bean)}\n")

    # Decode
    print("2. dict -> Record:")
    decoded = map_to_object(DemoBean, {"id": 123, "name": "ABCDEFG"})
    print(f"   {decoded}\n")

    # Derived attributes have no writer and are ignored on the way back
    print("3. Derived attribute ignored on decode:")
    decoded = map_to_object(DemoBean, {"id": 1, "name": "short", "longName": True})
    print(f"   {decoded}")


if __name__ == "__main__":
    main()
