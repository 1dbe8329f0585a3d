from postlist import PostingList
from search import and_query, or_query


def test_and_query_many_lists():
    a = PostingList([1, 2, 3, 4, 5])
    b = PostingList([2, 3, 5, 8])
    c = PostingList([3, 5, 13])
    assert list(and_query(a, b, c)) == [3, 5]
    assert list(a) == [1, 2, 3, 4, 5]
    assert list(b) == [2, 3, 5, 8]
    assert list(c) == [3, 5, 13]


def test_and_query_stops_on_empty():
    ans = and_query(PostingList([1, 2]), PostingList(), PostingList([1]))
    assert len(ans) == 0


def test_single_list_is_copied():
    a = PostingList([4, 2])
    for ans in (and_query(a), or_query(a)):
        assert list(ans) == [2, 4]
        assert ans is not a
        assert ans.head is not a.head


def test_no_lists():
    assert len(and_query()) == 0
    assert len(or_query()) == 0


def test_or_query_many_lists():
    a = PostingList([1, 4])
    b = PostingList([2, 4])
    c = PostingList([9])
    assert list(or_query(a, b, c)) == [1, 2, 4, 9]
    assert list(a) == [1, 4]
