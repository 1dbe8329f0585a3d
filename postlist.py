import logging

import config

logger = logging.getLogger(__name__)


class PostingListError(Exception):
    """Raised when a posting list is no longer strictly ascending."""


# Node class
class Node:
    __slots__ = ("data", "next")

    # Function to initialize the node object
    def __init__(self, data, next=None):
        self.data = data
        self.next = next

    # Function to view node
    def __str__(self):
        nextNode = self.next.data if self.next is not None else None
        return "%s -> %s" % (self.data, nextNode)

    def __repr__(self):
        return self.__str__()


def _checkDocId(docId):
    # bool is an int subclass but never a docID
    if isinstance(docId, bool) or not isinstance(docId, int):
        raise TypeError("docID must be an int, not %s" % type(docId).__name__)


def _checkOther(other):
    if not isinstance(other, PostingList):
        raise TypeError("Can only combine with another PostingList")


# Linked List class
class PostingList:
    # Function to initialize the Posting List object
    # (singly linked, ascending docIDs, no duplicates)
    def __init__(self, docIds=None):
        self.head = None
        self.length = 0
        if docIds is not None:
            docIds = list(docIds)
            for docId in docIds:
                _checkDocId(docId)
            tail = None
            for docId in sorted(set(docIds)):
                tail = self._append(tail, docId)

    # Function to view list
    def __str__(self):
        return " ".join(str(docId) for docId in self)

    def __repr__(self):
        return "PostingList[%s]" % ", ".join(str(docId) for docId in self)

    def __iter__(self):
        curr = self.head
        while curr is not None:
            yield curr.data
            curr = curr.next

    def __len__(self):
        return self.length

    def __contains__(self, docId):
        if isinstance(docId, bool) or not isinstance(docId, int):
            return False
        curr = self.head
        while curr is not None and curr.data < docId:
            curr = curr.next
        return curr is not None and curr.data == docId

    def __and__(self, other):
        return self.intersect(other)

    def __or__(self, other):
        return self.union(other)

    def _append(self, tail, docId):
        """
        Link a fresh node after tail (or as head when tail is None), return it
        """
        node = Node(docId)
        if tail is None:
            self.head = node
        else:
            tail.next = node
        self.length += 1
        return node

    def _verify(self):
        if config.CHECK_INVARIANTS:
            self.checkInvariant()

    def checkInvariant(self):
        """
        Walk the list, raise PostingListError unless docIDs are strictly
        ascending and length matches the number of nodes
        """
        count = 0
        prev = None
        curr = self.head
        while curr is not None:
            if prev is not None and prev.data >= curr.data:
                raise PostingListError(
                    "docID %s follows %s at position %d" % (curr.data, prev.data, count))
            prev = curr
            curr = curr.next
            count += 1
        if count != self.length:
            raise PostingListError(
                "length is %d but list holds %d nodes" % (self.length, count))

    def copy(self):
        ans = PostingList()
        tail = None
        for docId in self:
            tail = ans._append(tail, docId)
        return ans

    # Add new docID
    def addDocument(self, docId):
        """
        Insert docId keeping the list ascending.
        Returns True if the list changed, False if docId was already present
        """
        _checkDocId(docId)
        curr = self.head
        # Empty list / docID smaller than head, new node becomes head
        if curr is None or curr.data > docId:
            self.head = Node(docId, curr)
            self.length += 1
            self._verify()
            return True

        if curr.data == docId:
            return False

        # Move forward while the next docID is smaller, curr marks the insertion point
        while curr.next is not None and curr.next.data < docId:
            curr = curr.next

        if curr.next is not None and curr.next.data == docId:
            return False

        curr.next = Node(docId, curr.next)
        self.length += 1
        self._verify()
        return True

    # Remove docID
    def removeDocument(self, docId):
        """
        Remove docId if present.
        Returns True if the list changed, False otherwise
        """
        # Relies on the list holding no duplicates
        _checkDocId(docId)
        if self.head is None:
            return False

        if self.head.data == docId:
            self.head = self.head.next
            self.length -= 1
            self._verify()
            return True

        # Advance prev to the node before the one to be removed
        prev = self.head
        while prev.next is not None and prev.next.data < docId:
            prev = prev.next

        if prev.next is None or prev.next.data != docId:
            return False

        prev.next = prev.next.next
        self.length -= 1
        self._verify()
        return True

    def mergeInto(self, other):
        """
        Move every node of other into this list, keeping it ascending.
        No node is created; on equal docIDs this list keeps its own node and
        the one from other is dropped. other is empty afterwards.
        """
        _checkOther(other)
        if other is self:
            raise ValueError("Cannot merge a PostingList into itself")

        otherP = other.head  # pointer into other list
        prev = None  # node behind curr in this list
        curr = self.head
        dropped = 0

        while otherP is not None and curr is not None:
            if otherP.data < curr.data:
                # Splice otherP in before curr
                following = otherP.next
                otherP.next = curr
                if prev is None:
                    self.head = otherP
                else:
                    prev.next = otherP
                prev = otherP
                otherP = following
            elif otherP.data == curr.data:
                otherP = otherP.next
                dropped += 1
            else:
                prev = curr
                curr = curr.next

        # Whatever is left of other goes on the end in one piece
        if otherP is not None:
            if prev is None:
                self.head = otherP
            else:
                prev.next = otherP

        logger.debug(f"Merged {other.length} nodes into {self.length}, dropped {dropped} duplicates")
        self.length += other.length - dropped
        other.head = None
        other.length = 0
        self._verify()

    def intersect(self, other):
        """
        Return a new list of the docIDs present in both lists.
        Neither list is changed.
        """
        _checkOther(other)
        ans = PostingList()
        tail = None
        pointer1 = self.head
        pointer2 = other.head

        while pointer1 is not None and pointer2 is not None:
            value1 = pointer1.data
            value2 = pointer2.data
            if value1 == value2:
                tail = ans._append(tail, value1)
                pointer1 = pointer1.next
                pointer2 = pointer2.next
            elif value1 < value2:
                pointer1 = pointer1.next
            else:
                pointer2 = pointer2.next

        ans._verify()
        return ans

    def union(self, other):
        """
        Return a new list of the docIDs present in at least one list.
        Neither list is changed.
        """
        _checkOther(other)
        ans = PostingList()
        tail = None
        p = self.head
        q = other.head

        while p is not None or q is not None:
            if p is None or (q is not None and q.data < p.data):
                docId = q.data
                q = q.next
            elif q is None or p.data < q.data:
                docId = p.data
                p = p.next
            else:
                # Same docID on both sides, emitted once
                docId = p.data
                p = p.next
                q = q.next
            tail = ans._append(tail, docId)

        ans._verify()
        return ans
