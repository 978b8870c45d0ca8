from roundini import AccessError, Document, Section
import copy
import pytest


@pytest.fixture
def document() -> Document:
    doc = Document()
    doc.untitled.set("version", "3")
    server = doc.get_or_create("server")
    server.add_comments("leading")
    server.set("host", "localhost")
    server.add_comments("after host")
    server.set("port", "8080")
    server.add_comments("after port")
    doc.get_or_create("client").set("retries", "5")
    return doc


class TestSection:

    def test_set_and_get(self):
        section = Section("s")
        section.set("a", "1")
        section["b"] = 2
        assert section.get("a") == "1"
        assert section["b"] == "2"
        assert section.get("missing") is None
        assert section.get("missing", "x") == "x"
        with pytest.raises(KeyError):
            section["missing"]

    def test_set_invalid(self):
        section = Section("s")
        with pytest.raises(TypeError):
            section.set(1, "a")
        with pytest.raises(TypeError):
            section.set("a", None)

    def test_order(self):
        section = Section("s")
        for key in "cab":
            section.set(key, key)
        section.set("a", "overwritten")
        assert list(section) == ["c", "a", "b"]
        assert section.remove("c")
        section.set("c", "again")
        assert list(section) == ["a", "b", "c"]
        assert section.to_dict() == {"a": "overwritten", "b": "b", "c": "again"}

    def test_remove(self):
        section = Section("s")
        section.set("a", "1")
        assert section.remove("a")
        assert not section.remove("a")
        assert not section.contains("a")
        with pytest.raises(KeyError):
            del section["a"]

    def test_rename(self):
        section = Section("s")
        section.set("a", "1")
        section.set("b", "2")
        section.add_comments_before("a", "about a")
        assert section.rename("a", "z")
        assert list(section) == ["z", "b"]
        assert section.comments_before("z") == ["about a"]
        assert not section.rename("missing", "y")
        assert not section.rename("z", "b")
        assert not section.rename("z", "z")
        assert section.to_dict() == {"z": "1", "b": "2"}

    def test_counts(self):
        section = Section("s")
        assert not section.has_content()
        section.add_comments("c1", ["c2", "c3"])
        section.set("a", "1")
        assert section.count() == len(section) == 1
        assert section.count_keys_and_comments() == 4
        assert section.has_content()
        section.clear()
        assert not section.has_content()
        section.dangling_text = "text"
        assert section.has_content()

    def test_comments(self):
        section = Section("s")
        section.add_comments("leading")
        section.set("a", "1")
        section.add_comments("after a")
        section.set("b", "2")
        assert section.leading_comments == ["leading"]
        assert section.comments_before("a") == ["leading"]
        assert section.comments_after("a") == ["after a"]
        assert section.comments_before("b") == ["after a"]
        assert section.comments_after("b") == []

        section.add_comments_after("b", "after b")
        section.add_comments_before("b", "also before b")
        assert section.comments_before("b") == ["after a", "also before b"]
        assert section.all_comments() == [
            "leading",
            "after a",
            "also before b",
            "after b",
        ]

        section.remove_comments_before("b")
        assert section.comments_after("a") == []
        assert section.comments_after("b") == ["after b"]
        section.remove_comments_after("b")
        assert section.all_comments() == ["leading"]
        section.remove_all_comments()
        assert section.all_comments() == []
        assert section.to_dict() == {"a": "1", "b": "2"}

    def test_comments_of_missing_key(self):
        section = Section("s")
        with pytest.raises(AccessError):
            section.comments_before("missing")
        with pytest.raises(AccessError):
            section.add_comments_after("missing", "c")

    def test_removed_key_leaves_comments(self):
        section = Section("s")
        section.add_comments("leading")
        section.set("a", "1")
        section.add_comments("after a")
        section.set("b", "2")
        section.add_comments("after b")

        section.remove("b")
        assert section.comments_after("a") == ["after a", "after b"]
        section.remove("a")
        assert section.leading_comments == ["leading", "after a", "after b"]

        section.set("c", "3")
        assert section.comments_before("c") == ["leading", "after a", "after b"]
        assert section.comments_after("c") == []

    def test_iter_content(self):
        section = Section("s")
        section.add_comments("leading")
        section.set("a", "1")
        section.add_comments("after a")
        section.set("b", "2")
        assert list(section.iter_content()) == [
            "leading",
            ("a", "1"),
            "after a",
            ("b", "2"),
        ]

    def test_str(self):
        assert str(Section()) == "(untitled)"
        assert str(Section("s")) == "[s]"


class TestTypedAccess:

    @pytest.fixture
    def section(self) -> Section:
        section = Section("typed")
        for key, value in {
            "int": " 42 ",
            "negative": "-7",
            "big": "4294967296",
            "huge": str(2**63),
            "float": "1.5",
            "yes": "Yes",
            "off": "off",
            "list": "a, b ,c",
            "empty": "",
            "text": "abc",
            "underscored": "1_000",
        }.items():
            section.set(key, value)
        return section

    def test_int(self, section: Section):
        assert section.get_as_int("int") == 42
        assert section.get_as_int("negative") == -7
        for key in ["big", "float", "text", "empty", "underscored", "missing"]:
            with pytest.raises(AccessError):
                section.get_as_int(key)
        assert section.get_as_int("text", default=0) == 0
        assert section.get_as_int("missing", None) is None

    def test_long(self, section: Section):
        assert section.get_as_long("big") == 2**32
        with pytest.raises(AccessError):
            section.get_as_long("huge")

    def test_float(self, section: Section):
        assert section.get_as_float("float") == 1.5
        assert section.get_as_float("int") == 42.0
        with pytest.raises(AccessError):
            section.get_as_float("text")

    def test_bool(self, section: Section):
        assert section.get_as_bool("yes") is True
        assert section.get_as_bool("off") is False
        with pytest.raises(AccessError):
            section.get_as_bool("text")
        assert section.get_as_bool("text", True) is True

    def test_list(self, section: Section):
        assert section.get_as_list("list") == ["a", "b", "c"]
        assert section.get_as_list("empty") == []

    def test_get_as(self, section: Section):
        assert section.get_as("int", lambda s: int(s) * 2) == 84
        with pytest.raises(AccessError):
            section.get_as("text", int)
        assert section.get_as("text", int, -1) == -1


class TestDocument:

    def test_untitled(self):
        doc = Document()
        assert doc.untitled.name is None
        assert doc.count() == len(doc) == 0
        assert doc.section_names() == []

    def test_get_or_create(self, document: Document):
        assert document.get("missing") is None
        created = document.get_or_create("new")
        assert document.get_or_create("new") is created
        assert document.section_names() == ["server", "client", "new"]
        assert [name for name, _ in document] == ["server", "client", "new"]
        with pytest.raises(TypeError):
            document.get_or_create(None)

    def test_remove(self, document: Document):
        assert document.remove("server")
        assert not document.remove("server")
        assert "server" not in document
        assert document.get_or_create("server").count() == 0
        assert document.section_names() == ["client", "server"]

    def test_rename(self, document: Document):
        server = document["server"]
        assert document.rename("server", "backend")
        assert document.section_names() == ["backend", "client"]
        assert document["backend"] is server
        assert server.name == "backend"
        assert not document.rename("missing", "x")
        assert not document.rename("backend", "client")
        assert not document.rename("client", "client")

    def test_clear(self, document: Document):
        document.clear(including_untitled=False)
        assert document.count() == 0
        assert document.untitled.get("version") == "3"
        document.clear()
        assert not document.untitled.has_content()

    def test_deep_clone(self, document: Document):
        clone = document.deep_clone()
        assert clone == document
        assert clone["server"] is not document["server"]
        clone["server"].set("host", "remote")
        clone["server"].add_comments_after("port", "new")
        clone.untitled.dangling_text = "text"
        assert document["server"].get("host") == "localhost"
        assert document["server"].comments_after("port") == ["after port"]
        assert document.untitled.dangling_text is None
        assert copy.deepcopy(document) == document
        assert copy.deepcopy(document) is not document

    def test_equality(self, document: Document):
        other = document.deep_clone()
        assert other == document
        other.remove("server")
        other.get_or_create("server")
        assert other != document

    def test_quick_access(self, document: Document):
        assert document.get_item_value("server", "port") == "8080"
        assert document.get_item_value("missing", "port") is None
        assert document.get_item_value("server", "missing", "x") == "x"
        assert document.get_item_value_as_int("server", "port") == 8080
        assert document.get_item_value_as_long("client", "retries") == 5
        document.set_item_value("flags", "debug", True)
        assert document.get_item_value("flags", "debug") == "True"
        assert document.get_item_value_as_bool("flags", "debug") is True
        assert document.contains_item_value("flags", "debug")
        assert not document.contains_item_value("flags", "verbose")
        assert not document.contains_item_value("missing", "debug")

    def test_quick_access_errors(self, document: Document):
        with pytest.raises(AccessError, match='Section "missing" not found.'):
            document.get_item_value_as_int("missing", "port")
        with pytest.raises(AccessError, match='Key "missing" not found.'):
            document.get_item_value_as_bool("server", "missing")
        with pytest.raises(AccessError):
            document.get_item_value_as_int("server", "host")
        assert document.get_item_value_as_int("missing", "port", 1) == 1
        assert document.get_item_value_as_int("server", "host", 1) == 1
