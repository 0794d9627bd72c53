# What it does: Compares the old and new line sets of a program and splits them into added, removed and unchanged lines
# What data structure it uses: Set (for efficient O(N) difference and intersection), List (sorted results)

def compare_sets(old_lines, new_lines): # Compares two line sets and returns sorted added/removed/unchanged lists
    old_lines = set(old_lines)
    new_lines = set(new_lines)

    added = sorted(new_lines - old_lines)
    removed = sorted(old_lines - new_lines)
    unchanged = sorted(new_lines & old_lines)

    return {'added': added, 'removed': removed, 'unchanged': unchanged}
