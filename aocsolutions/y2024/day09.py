"""Disk Fragmenter: compact a disk map and compute its checksum."""

from itertools import groupby


def _expand(text):
    """Expand a dense disk map into blocks: file ids, or None for free space."""
    blocks = []
    for index, char in enumerate(text):
        if not "0" <= char <= "9":
            raise ValueError(f"invalid disk map digit {char!r}")
        size = int(char)
        blocks.extend([index // 2 if index % 2 == 0 else None] * size)
    return blocks


def _checksum(blocks):
    return sum(index * block for index, block in enumerate(blocks) if block is not None)


def part1(text):
    """Checksum after moving single blocks from the end into the leftmost gaps."""
    blocks = _expand(text)
    free = blocks.count(None)
    movers = [block for block in reversed(blocks) if block is not None][:free]
    compacted = list(blocks)
    i = 0
    for block in movers:
        while compacted[i] is not None:
            i += 1
        compacted[i] = block
    compacted = compacted[: len(compacted) - free] + [None] * free
    return _checksum(compacted)


def part2(text):
    """Checksum after moving whole files, highest id first, into the leftmost fitting gap."""
    blocks = _expand(text)
    runs = []
    files = []
    start = 0
    for block, group in groupby(blocks):
        length = sum(1 for _ in group)
        if block is None:
            runs.append([start, length])
        else:
            files.append((start, length, block))
        start += length

    compacted = list(blocks)
    for file_start, length, file_id in reversed(files):
        for run in runs:
            if run[0] >= file_start:
                break
            if run[1] >= length:
                compacted[run[0] : run[0] + length] = [file_id] * length
                compacted[file_start : file_start + length] = [None] * length
                run[0] += length
                run[1] -= length
                break
    return _checksum(compacted)