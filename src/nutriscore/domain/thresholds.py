"""Reference breakpoint tables, highest threshold first."""

ENERGY_KJ = (3350, 3015, 2680, 2345, 2010, 1675, 1340, 1005, 670, 335)
ENERGY_KJ_BEVERAGE = (270, 240, 210, 180, 150, 120, 90, 60, 30, 0)
SUGARS_G = (45, 40, 36, 31, 27, 22.5, 18, 13.5, 9, 4.5)
SUGARS_G_BEVERAGE = (13.5, 12, 10.5, 9, 7.5, 6, 4.5, 3, 1.5, 0)
SATURATED_FAT_G = (10, 9, 8, 7, 6, 5, 4, 3, 2, 1)
SODIUM_MG = (900, 810, 720, 630, 540, 450, 360, 270, 180, 90)
FIBRE_G = (4.7, 3.7, 2.8, 1.9, 0.9)
PROTEIN_G = (8, 6.4, 4.8, 3.2, 1.6)

GRADE_FOOD = (18, 10, 2, -1)
GRADE_BEVERAGE = (9, 5, 1, -2)

# Fruit points use explicit (percent, points) buckets instead of a table.
FRUIT_BUCKETS = ((80, 5), (60, 2), (40, 1))
FRUIT_BUCKETS_BEVERAGE = ((80, 10), (60, 4), (40, 2))

# Above this many negative points, protein stops counting unless fruit is high.
PROTEIN_CAP_NEGATIVE_POINTS = 11
PROTEIN_CAP_FRUIT_POINTS = 5

KJ_PER_KCAL = 4.184
SALT_TO_SODIUM_RATIO = 2.5
