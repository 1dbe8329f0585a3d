#!/usr/bin/python3
import getopt
import random
import sys

import config
import postlist
from log import configure_logger
from postlist import PostingList

logger = configure_logger(__file__)

# python3 check.py -t trials -s seed [-v]
MAX_DOC_ID = 2 ** 31 - 1


def usage():
    print("usage: " + sys.argv[0] + " [-t trials] [-s seed] [-v]")


def set_to_string(docIds):
    """
    Render a set the way str(PostingList) renders a list
    """
    return " ".join(str(docId) for docId in sorted(docIds))


def random_lists(prng, trial, size=100, bound=500, disjoint=False):
    """
    Build two (PostingList, set) pairs of random docIDs below bound.
    Trial 0 leaves the first pair empty, trial 1 the second one.
    """
    set1 = set()
    list1 = PostingList()
    if trial != 0:
        for i in range(size):
            n = prng.randrange(bound)
            if n not in set1:
                list1.addDocument(n)
                set1.add(n)

    set2 = set()
    list2 = PostingList()
    if trial != 1:
        for i in range(size):
            n = prng.randrange(bound)
            if disjoint and n in set1:
                continue
            if n not in set2:
                list2.addDocument(n)
                set2.add(n)
    return list1, set1, list2, set2


def describe_case(trial):
    if trial == 0:
        return "current list is empty"
    if trial == 1:
        return "other list is empty"
    return "general case"


def checkAddDocument(prng, trials):
    success = True
    for t in range(trials):
        docIds = set()
        plist = PostingList()
        for i in range(1000):
            n = prng.randint(-MAX_DOC_ID - 1, MAX_DOC_ID)
            changed = plist.addDocument(n)
            if changed == (n in docIds):
                logger.error(f"addDocument({n}) returned {changed}")
                success = False
            docIds.add(n)
        if str(plist) != set_to_string(docIds):
            logger.error("addDocument produced an unordered or incomplete list")
            success = False
    return success


def checkRemoveDocument(prng, trials):
    success = True

    if PostingList().removeDocument(0):
        logger.error("Bad return value on remove from empty list.")
        success = False

    plist = PostingList()
    plist.addDocument(1)
    if not plist.removeDocument(1) or str(plist) != "":
        logger.error("Failed to remove from a list with one element.")
        success = False

    for docId, where in ((99, "last"), (0, "first")):
        plist = PostingList(range(100))
        docIds = set(range(100))
        docIds.remove(docId)
        if not plist.removeDocument(docId) or str(plist) != set_to_string(docIds):
            logger.error(f"Failed to remove {where} element in list.")
            success = False

    plist = PostingList(range(100))
    docIds = set(range(100))
    for t in range(trials):
        for i in range(100):
            n = prng.randrange(100)
            expected = n in docIds
            docIds.discard(n)
            removed = plist.removeDocument(n)
            if str(plist) != set_to_string(docIds):
                logger.error(f"Failed to remove random element {n} in list.")
                success = False
            if removed != expected:
                logger.error(f"Bad return value {removed} on remove of {n}.")
                success = False
    return success


def checkMergeInto(prng, trials):
    success = True
    for t in range(trials):
        list1, set1, list2, set2 = random_lists(prng, t, disjoint=t % 2 == 0)
        list1.mergeInto(list2)
        set1 |= set2
        if list2.head is not None or len(list2) != 0:
            logger.error("mergeInto did not empty the other list.")
            success = False
        if str(list1) != set_to_string(set1):
            logger.error(f"mergeInto incorrectly merges if {describe_case(t)}.")
            success = False
    return success


def checkIntersect(prng, trials):
    success = True
    for t in range(trials):
        list1, set1, list2, set2 = random_lists(prng, t)
        ans = list1.intersect(list2)
        if str(list1) != set_to_string(set1) or str(list2) != set_to_string(set2):
            logger.error("intersect changed one of its inputs.")
            success = False
        if str(ans) != set_to_string(set1 & set2):
            logger.error(f"intersect incorrectly merges if {describe_case(t)}.")
            success = False
    return success


def checkUnion(prng, trials):
    success = True
    for t in range(trials):
        list1, set1, list2, set2 = random_lists(prng, t)
        ans = list1.union(list2)
        if str(list1) != set_to_string(set1) or str(list2) != set_to_string(set2):
            logger.error("union changed one of its inputs.")
            success = False
        if str(ans) != set_to_string(set1 | set2):
            logger.error(f"union incorrectly merges if {describe_case(t)}.")
            success = False
    return success


CHECKS = [
    checkAddDocument,
    checkRemoveDocument,
    checkMergeInto,
    checkIntersect,
    checkUnion,
]


def run_checks(trials=25, seed=None):
    """
    Run every check against a set of the same docIDs, return True if all pass
    """
    if seed is None:
        seed = random.randrange(2 ** 32)
    logger.info(f"running {len(CHECKS)} checks, {trials} trials, seed {seed}")
    prng = random.Random(seed)

    success = True
    for check in CHECKS:
        if check(prng, trials):
            logger.info(f"{check.__name__} passed")
        else:
            logger.error(f"{check.__name__} failed (seed {seed})")
            success = False
    return success


def main(argv=None):
    trials = 25
    seed = None
    verbose = False

    try:
        opts, args = getopt.getopt(sys.argv[1:] if argv is None else argv, 't:s:v')
    except getopt.GetoptError:
        usage()
        return 2

    for o, a in opts:
        if o == '-t':
            trials = a
        elif o == '-s':
            seed = a
        elif o == '-v':
            verbose = True
        else:
            assert False, "unhandled option"

    try:
        trials = int(trials)
        seed = int(seed) if seed is not None else None
    except ValueError:
        usage()
        return 2

    if verbose:
        config.LOG_LEVEL = "DEBUG"
        for lg in (logger, configure_logger(postlist.__file__)):
            lg.setLevel(config.LOG_LEVEL)
            for handler in lg.handlers:
                handler.setLevel(config.LOG_LEVEL)

    return 0 if run_checks(trials, seed) else 1


if __name__ == "__main__":
    sys.exit(main())
