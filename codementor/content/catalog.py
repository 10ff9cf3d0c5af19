#!/usr/bin/env python3
"""
Built-in exercise and tutorial content.
"""

from functools import lru_cache

from .loader import catalog_from_dict
from .models import Catalog


BUILTIN_CONTENT = {
    'exercises': {
        'beginner': [
            {
                'title': "Find Maximum Number",
                'description': "Write a function that finds the largest number in an array.",
                'template': "function findMax(numbers) {\n    // Your code here\n}",
                'example': "findMax([3, 7, 2, 9, 1]) should return 9",
                'solution': "function findMax(numbers) {\n    return Math.max(...numbers);\n}",
                'difficulty': 'beginner',
            },
            {
                'title': "Count Vowels",
                'description': "Create a function that counts vowels in a string.",
                'template': "function countVowels(str) {\n    // Your code here\n}",
                'example': "countVowels('hello') should return 2",
                'solution': (
                    "function countVowels(str) {\n"
                    "    const vowels = 'aeiouAEIOU';\n"
                    "    return str.split('').filter(char => vowels.includes(char)).length;\n"
                    "}"
                ),
                'difficulty': 'beginner',
            },
        ],
        'intermediate': [
            {
                'title': "Palindrome Checker",
                'description': "Write a function that checks if a string is a palindrome.",
                'template': "function isPalindrome(str) {\n    // Your code here\n}",
                'example': "isPalindrome('racecar') should return true",
                'solution': (
                    "function isPalindrome(str) {\n"
                    "    const cleaned = str.toLowerCase().replace(/[^a-z]/g, '');\n"
                    "    return cleaned === cleaned.split('').reverse().join('');\n"
                    "}"
                ),
                'difficulty': 'intermediate',
            },
        ],
        'advanced': [
            {
                'title': "Binary Search Implementation",
                'description': "Implement binary search algorithm for a sorted array.",
                'template': "function binarySearch(arr, target) {\n    // Your code here\n}",
                'example': "binarySearch([1, 3, 5, 7, 9], 5) should return 2 (index)",
                'solution': (
                    "function binarySearch(arr, target) {\n"
                    "    let left = 0, right = arr.length - 1;\n"
                    "    while (left <= right) {\n"
                    "        const mid = Math.floor((left + right) / 2);\n"
                    "        if (arr[mid] === target) return mid;\n"
                    "        if (arr[mid] < target) left = mid + 1;\n"
                    "        else right = mid - 1;\n"
                    "    }\n"
                    "    return -1;\n"
                    "}"
                ),
                'difficulty': 'advanced',
            },
        ],
    },

    'tutorials': {
        'variables': [
            {
                'title': "What are Variables?",
                'content': (
                    "Variables are containers that store data values. In JavaScript, "
                    "you can declare variables using let, const, or var."
                ),
                'code': "let message = 'Hello World';\nconst pi = 3.14159;\nvar count = 0;",
            },
            {
                'title': "Data Types",
                'content': (
                    "JavaScript has several data types: strings, numbers, booleans, "
                    "arrays, objects, and more."
                ),
                'code': (
                    "let name = 'Alice';        // String\n"
                    "let age = 25;            // Number\n"
                    "let isStudent = true;    // Boolean\n"
                    "let hobbies = ['reading', 'coding']; // Array"
                ),
            },
        ],
        'functions': [
            {
                'title': "Function Basics",
                'content': "Functions are reusable blocks of code that perform specific tasks.",
                'code': (
                    "function greet(name) {\n"
                    "    return 'Hello, ' + name + '!';\n"
                    "}\n"
                    "\n"
                    "const message = greet('Alice');"
                ),
            },
        ],
    },

    'topic_labels': {
        'variables': "Variables & Data Types",
        'functions': "Functions",
    },
}


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """The built-in catalog (parsed once per process)"""
    return catalog_from_dict(BUILTIN_CONTENT, source='<builtin>')
