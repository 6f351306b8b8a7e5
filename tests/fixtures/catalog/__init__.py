"""Well-formed error catalog: temperatures, amounts and bank statement files.

Also holds malformed documentation links that discovery must skip.
"""
