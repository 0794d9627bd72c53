# What it does: Reads program URL lists into sets of lines and writes sorted line lists back to disk
# What data structure it uses: Set (to collapse duplicate lines with near O(1) average time complexity inserts), List (sorted output lines)

import os

def read_lines(path):
    """
    Reads a text file and returns (lines, error).
    Lines are split on '\\n' only, stripped, blank lines are dropped and duplicates collapse.
    Bytes that are not valid UTF-8 are kept as surrogate escapes so write_lines restores them unchanged.
    If the file cannot be read, returns an empty set and the error message.
    """
    lines = set()
    try:
        with open(path, 'r', encoding='utf-8', errors='surrogateescape', newline='\n') as f:
            for line in f:
                line = line.strip()
                if line:
                    lines.add(line)
    except (OSError, ValueError) as e:  # ValueError: embedded NUL in path
        return set(), str(e)
    return lines, None

def write_lines(lines, path): # Writes lines in ascending order, one per line, creating parent directories. Raises OSError or ValueError
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, 'w', encoding='utf-8', errors='surrogateescape', newline='\n') as f:
        for line in sorted(lines):
            f.write(line + '\n')
