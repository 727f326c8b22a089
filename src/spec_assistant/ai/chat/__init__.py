"""
AI Chat module for construction-management questions.

Answers are grounded in the construction specification document through the
OpenAI file_search tool.
"""
