import logging

from postlist import PostingList

logger = logging.getLogger(__name__)


def and_query(*postingLists):
    """
    Intersect any number of posting lists, shortest first.
    Returns a new PostingList; the inputs are not changed.
    """
    if not postingLists:
        return PostingList()

    # Smallest lists first keeps the running result short
    ordered = sorted(postingLists, key=len)
    ans = ordered[0].copy()
    for postingList in ordered[1:]:
        if len(ans) == 0:
            logger.debug("AND result empty, skipping remaining lists")
            break
        ans = ans.intersect(postingList)
    return ans


def or_query(*postingLists):
    """
    Union of any number of posting lists.
    Returns a new PostingList; the inputs are not changed.
    """
    ans = PostingList()
    for postingList in postingLists:
        ans = ans.union(postingList)
    return ans
