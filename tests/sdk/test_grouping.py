from typing import ClassVar

from hatstall import Requestable, group_by_section_key, grouped, section_titles


class Person(Requestable):
    base_path: ClassVar[str] = "/people"

    name: str

    def section_key(self) -> str:
        return self.name[:1].upper()

    @classmethod
    def title_for_index(cls, index: int) -> str:
        return f"Section {index}"


class TestGrouping:
    def test_grouped(self):
        assert grouped([1, 2, 3]) == [[1, 2, 3]]

    def test_grouped_empty(self):
        assert grouped([]) == [[]]

    def test_group_by_section_key_uses_model_key(self):
        people = [Person(name=name) for name in ["bob", "alice", "bea", "al"]]

        sections = group_by_section_key(people)

        assert [[p.name for p in section] for section in sections] == [
            ["bob", "bea"],
            ["alice", "al"],
        ]

    def test_group_by_explicit_key(self):
        assert group_by_section_key([1, 2, 3, 4], key=lambda n: str(n % 2)) == [
            [1, 3],
            [2, 4],
        ]

    def test_group_by_section_key_empty(self):
        assert group_by_section_key([]) == []

    def test_section_titles(self):
        sections = group_by_section_key([Person(name="a"), Person(name="b")])

        assert section_titles(Person, sections) == ["Section 0", "Section 1"]


class TestRequestableDefaults:
    def test_defaults(self):
        class Plain(Requestable):
            pass

        plain = Plain()

        assert plain.section_key() == ""
        assert Plain.title_for_index(0) == ""
        assert Plain.object_for_header([[plain]], [plain], 0) is None
        assert group_by_section_key([plain, Plain()]) == [[plain, Plain()]]
