from schemas.seed import AdminSeed, ProjectSeed, SeedDataset, SeedResult
