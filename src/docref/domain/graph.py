from src.docref.domain.entities import ReferenceMap


def infect_refs(ref_map: ReferenceMap) -> ReferenceMap:
    """Append each referenced document's refs to every document that lists it.

    This is a single level of propagation: each key's list is snapshotted
    before its loop, so refs appended during the pass are not followed again.
    Duplicates are kept. The mapping is mutated in place and returned.
    """
    for key in list(ref_map):
        snapshot = tuple(ref_map[key])
        for ref in snapshot:
            if ref in ref_map:
                ref_map[key] = ref_map[key] + ref_map[ref]
    return ref_map
