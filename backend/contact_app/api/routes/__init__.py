"""
Route modules
"""
