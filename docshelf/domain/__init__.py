"""Domain layer - Pure business logic.

Catalog entities, the loose semantic-version value object, and the protocols
(ports) the application layer depends on. The domain layer has NO
dependencies on any framework or infrastructure - it is pure Python.

Structure:
- entities/: Project, VersionGroup, Version and the VersionCatalog aggregate
- value_objects/: SemVer (loose parsing and ordering)
- protocols/: ArchiveProvider, DocArchive, LoggerProtocol
- errors/: Domain errors returned in Result types
"""
