#!/usr/bin/env python3
"""
isohex Lumatone Mapping Generator
Run this script to generate .ltn mappings and diagrams (see --help).
"""

if __name__ == "__main__":
    import sys
    from isohex.main import main
    sys.exit(main())
