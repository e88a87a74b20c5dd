"""Stable numeric identifiers for jobs."""

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
UINT32_MASK = 0xFFFFFFFF


def job_id_from_title(title: str) -> int:
    """
    Hash a job title to its 32-bit identifier (FNV-1a).
    
    The same title always yields the same id, across runs and hosts, so an
    orchestrator may persist ids between plugin restarts.
    
    Args:
        title: Job title exactly as declared (case is not folded)
        
    Returns:
        Unsigned 32-bit identifier
    """
    hash_value = FNV_OFFSET_BASIS
    for byte in title.encode("utf-8"):
        hash_value ^= byte
        hash_value = (hash_value * FNV_PRIME) & UINT32_MASK
    return hash_value
