"""
Clean URI Site Framework

Modules:
    models  - Value types (Pricing, Discount, ProductDescription)
    site    - Plugin contracts (Site, Canonizer, Extractor) and site discovery
    common  - Shared utilities (config loader, logging setup)
"""
