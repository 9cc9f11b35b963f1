"""Character, string, memory, linked-list, line-reading and output helpers used by the viewer."""