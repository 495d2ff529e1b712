from dsviz.core.errors import ErrorKind
from dsviz.core.types import MessageType
from dsviz.structures import linkedlist


def test_prepend_builds_chain():
    head = linkedlist.prepend(None, "b").head
    head = linkedlist.prepend(head, "a").head

    assert linkedlist.to_list(head) == ["a", "b"]
    assert head.next.next is None

    result = linkedlist.search(head, "b")
    assert result.found is True
    assert result.position == 1
    assert result.message.text == "Found b at position 1 in the linked list."


def test_append_to_empty_sets_head():
    result = linkedlist.append(None, 1)
    assert linkedlist.to_list(result.head) == [1]
    assert result.message.text == "Added 1 as the head of the linked list."


def test_append_keeps_old_list_intact():
    old = linkedlist.from_iterable([1, 2])
    result = linkedlist.append(old, 3)

    assert linkedlist.to_list(result.head) == [1, 2, 3]
    assert linkedlist.to_list(old) == [1, 2]
    assert result.message.text == "Appended 3 to the end of the linked list."


def test_length_and_render():
    head = linkedlist.from_iterable(["A", "B", "C"])
    assert linkedlist.length(head) == 3
    assert linkedlist.length(None) == 0
    assert linkedlist.render(head) == "[Head] A -> B -> C [Tail]"
    assert linkedlist.render(None) == ""


def test_get():
    head = linkedlist.from_iterable(["A", "B"])
    assert linkedlist.get(head, 1).value == "B"
    assert linkedlist.get(head, 2) is None
    assert linkedlist.get(head, -1) is None


def test_remove_head():
    head = linkedlist.from_iterable([1, 2, 3])
    result = linkedlist.remove(head, 1)

    assert result.removed is True
    assert linkedlist.to_list(result.head) == [2, 3]
    assert result.message.text == "Removed 1 from the head of the linked list."


def test_remove_middle_shares_suffix():
    head = linkedlist.from_iterable(["A", "B", "C", "D"])
    result = linkedlist.remove(head, "B")

    assert result.removed is True
    assert linkedlist.to_list(result.head) == ["A", "C", "D"]
    assert result.message.text == "Removed B from the linked list."
    # the old list is untouched and the tail after the match is reused
    assert linkedlist.to_list(head) == ["A", "B", "C", "D"]
    assert result.head.next is head.next.next


def test_remove_only_first_occurrence():
    head = linkedlist.from_iterable([1, 2, 1, 2])
    result = linkedlist.remove(head, 2)
    assert linkedlist.to_list(result.head) == [1, 1, 2]


def test_remove_missing_value():
    head = linkedlist.from_iterable([1, 2])
    result = linkedlist.remove(head, 9)

    assert result.removed is False
    assert result.head is head
    assert result.message.text == "Value 9 not found in the linked list."
    assert result.message.kind is ErrorKind.NOT_FOUND


def test_empty_list_errors_differ_from_not_found():
    removed = linkedlist.remove(None, 1)
    assert removed.message.text == "Cannot remove from an empty linked list."
    assert removed.message.kind is ErrorKind.EMPTY_STRUCTURE

    searched = linkedlist.search(None, 1)
    assert searched.found is False
    assert searched.message.text == "Cannot search an empty linked list."
    assert searched.message.kind is ErrorKind.EMPTY_STRUCTURE


def test_search_not_found():
    head = linkedlist.from_iterable(["A"])
    result = linkedlist.search(head, "Z")

    assert result.found is False
    assert result.position is None
    assert result.message.type is MessageType.ERROR
    assert result.message.text == "Value Z not found in the linked list."


def test_string_and_number_values_are_distinct():
    head = linkedlist.from_iterable(["1"])
    assert linkedlist.search(head, 1).found is False
