"""Small helpers for characters, numbers, strings, output and linked lists."""