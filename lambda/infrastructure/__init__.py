"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas de provedores, armazenamento e adapters HTTP
"""
