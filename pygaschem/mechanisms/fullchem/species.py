"""Species of the GEOS-Chem full chemistry mechanism.

Default mixing ratios are illustrative initial values for box model runs,
not climatological abundances.
"""

from __future__ import annotations

from pygaschem.core.reaction import Species

#: Species in state vector order
SPECIES: tuple[Species, ...] = (
    Species("A3O2", 59.469, "CH3CH2CH2OO; Primary RO2 from C3H8"),
    Species("ACET", 87.473, "CH3C(O)CH3; Acetone"),
    Species("ACTA", 70.187, "CH3C(O)OH; Acetic acid"),
    Species("AERI", 30.013, "I; Dissolved iodine"),
    Species("ALD2", 9.4976, "CH3CHO; Acetaldehyde"),
    Species("ALK4", 8.4827, ">= C4 alkanes"),
    Species("AONITA", 77.604, "Aerosol-phase organic nitrate from aromatic precursors"),
    Species("AROMRO2", 77.132, "generic peroxy radical from aromatic oxidation"),
    Species("AROMP4", 52.322, "Generic C4 product from aromatic oxidation"),
    Species("AROMP5", 4.8975, "Generic C5 product from aromatic oxidation"),
    Species("ATO2", 88.056, "CH3C(O)CH2O2; RO2 from acetone"),
    Species("ATOOH", 95.672, "CH3C(O)CH2OOH; ATO2 peroxide"),
    Species("B3O2", 44.692, "CH3CH(OO)CH3; Secondary RO2 from C3H8"),
    Species("BALD", 35.859, "benzaldehyde and tolualdehyde"),
    Species("BENZ", 18.166, "C6H6; Benzene"),
    Species("BENZO", 92.094, "C6H5O radical"),
    Species("BENZO2", 45.770, "C6H5O2 radical"),
    Species("BENZP", 45.646, "hydroperoxide from BENZO2"),
    Species("Br", 56.283, "Br; Atomic bromine"),
    Species("Br2", 98.265, "Br2; Molecular bromine"),
    Species("BrCl", 70.858, "BrCl; Bromine chloride"),
    Species("BrNO2", 15.765, "BrNO2; Nitryl bromide"),
    Species("BrNO3", 8.8808, "BrNO3; Bromine nitrate"),
    Species("BrO", 90.871, "BrO; Bromine monoxide"),
    Species("BRO2", 90.134, "C6H5O2 ; Peroxy radical from BENZ oxidation"),
    Species("BrSALA", 5.6082, "Br; Fine sea salt bromine"),
    Species("BrSALC", 23.602, "Br; Course sea salt bromine"),
    Species("BZCO3", 34.301, "benzoylperoxy radical"),
    Species("BZCO3H", 18.280, "perbenzoic acid"),
    Species("BZPAN", 25.224, "peroxybenzoyl nitrate"),
    Species("C2H2", 64.023, "C2H2; Ethyne"),
    Species("C2H4", 48.832, "Ethylene"),
    Species("C2H6", 95.500, "C2H6; Ethane"),
    Species("C3H8", 93.457, "C3H8; Propane"),
    Species("C4HVP1", 90.362, "C4 hydroxy-vinyl-peroxy radicals from HPALDs"),
    Species("C4HVP2", 60.972, "C4 hydroxy-vinyl-peroxy radicals from HPALDs"),
    Species("CCl4", 38.249, "CCl4; Carbon tetrachloride"),
    Species("CFC11", 16.012, "CCl3F ; CFC-11, R-11, Freon 11"),
    Species("CFC12", 60.683, "CCl2F2; CFC-12, R-12, Freon 12"),
    Species("CFC113", 99.375, "C2Cl3F3; CFC-113, Freon 113"),
    Species("CFC114", 82.883, "C2Cl2F4; CFC-114, Freon 114"),
    Species("CFC115", 63.617, "C2ClF5; CFC-115, Freon 115"),
    Species("CH2Br2", 53.658, "CH3Br2; Dibromomethane"),
    Species("CH2Cl2", 6.5485, "CH2Cl2; Dichloromethane"),
    Species("CH2I2", 62.463, "CH2I2; Diiodomethane"),
    Species("CH2IBr", 98.965, "CH2IBr; Bromoiodomethane"),
    Species("CH2ICl", 33.656, "CH2ICl; Chloroiodomethane"),
    Species("CH2O", 34.136, "CH2O; Formaldehyde"),
    Species("CH2OO", 72.666, "CH2OO; Criegee intermediate"),
    Species("CH3Br", 76.768, "CH3Br; Methyl bromide"),
    Species("CH3CCl3", 99.842, "CH3CCl3; Methyl chloroform"),
    Species("CH3CHOO", 27.830, "CH3CHOO; Criegee intermediate"),
    Species("CH3Cl", 14.055, "CH3Cl; Chloromethane"),
    Species("CH3I", 19.671, "CH3I; Methyl iodide"),
    Species("CH4", 6.9330, "CH4; Methane"),
    Species("CHBr3", 84.204, "CHBr3; Tribromethane"),
    Species("CHCl3", 79.435, "CHCl3; Chloroform"),
    Species("Cl", 47.484, "Cl; Atomic chlorine"),
    Species("Cl2", 71.292, "Cl2; Molecular chlorine"),
    Species("Cl2O2", 96.248, "Cl2O2; Dichlorine dioxide"),
    Species("ClNO2", 36.482, "ClNO2; Nitryl chloride"),
    Species("ClNO3", 55.020, "ClONO2; Chlorine nitrate"),
    Species("ClO", 0.9863, "ClO; Chlorine monoxide"),
    Species("ClOO", 53.802, "ClOO; Chlorine dioxide"),
    Species("CO", 32.978, "CO; Carbon monoxide"),
    Species("CO2", 55.611, "CO2; Carbon dioxide"),
    Species("CSL", 23.332, "cresols and xylols"),
    Species("DMS", 5.8615, "(CH3)2S; Dimethylsulfide"),
    Species("EOH", 18.988, "C2H5OH; Ethanol"),
    Species("ETHLN", 69.851, "CHOCH2ONO2; Ethanal nitrate"),
    Species("ETHN", 24.767, "stable hydroxy-nitrooxy-ethane"),
    Species("ETHP", 59.843, "stable hydroxy-hydroperoxy-ethane"),
    Species("ETNO3", 11.558, "C2H5ONO2; Ethyl nitrate"),
    Species("ETO", 85.116, "hydroxy-alkoxy-ethane radical"),
    Species("ETOO", 24.842, "hydroxy-peroxy-ethane radical, formed from ethene + OH"),
    Species("ETO2", 29.300, "CH3CH2OO; Ethylperoxy radical"),
    Species("ETP", 81.950, "CH3CH2OOH; Ethylhydroperoxide"),
    Species("GLYC", 20.407, "HOCH2CHO; Glycoaldehyde"),
    Species("GLYX", 81.571, "CHOCHO; Glyoxal"),
    Species("H", 7.6410, "H; Atomic hydrogen"),
    Species("H1211", 46.027, "CBrClF2; H-1211"),
    Species("H1301", 36.584, "CBrF3; H-1301"),
    Species("H2402", 52.639, "C2Br2F4; H-2402"),
    Species("H2O", 56.623, "H2O; Water vapor"),
    Species("H2O2", 44.325, "H2O2; Hydrogen peroxide"),
    Species("HAC", 88.335, "HOCH2C(O)CH3; Hydroxyacetone"),
    Species("HBr", 15.715, "HBr; Hypobromic acid"),
    Species("HC5A", 44.638, "C5H8O2; Isoprene-4,1-hydroxyaldehyde"),
    Species("HCFC123", 22.296, "C2HCl2F3; HCFC-123, R-123, Freon 123"),
    Species("HCFC141b", 93.091, "C(CH3)Cl2F; HCFC-141b, R-141b, Freon 141b"),
    Species("HCFC142b", 81.415, "C(CH3)ClF2; HCFC-142b, R-142b, Freon 142b"),
    Species("HCFC22", 16.333, "CHClF2 ; HCFC-22, R-22, Freon 22"),
    Species("HCl", 87.644, "HCl; Hydrochloric acid"),
    Species("HCOOH", 99.489, "HCOOH; Formic acid"),
    Species("HI", 68.377, "HI; Hydrogen iodide"),
    Species("HMHP", 16.437, "HOCH2OOH; Hydroxymethyl hydroperoxide"),
    Species("HMML", 33.654, "C4H6O3; Hydroxymethyl-methyl-a-lactone"),
    Species("HMS", 54.099, "HOCH2SO3-; hydroxymethanesulfonate"),
    Species("HNO2", 18.174, "HONO; Nitrous acid"),
    Species("HNO3", 62.170, "HNO3; Nitric acid"),
    Species("HNO4", 39.302, "HNO4; Pernitric acid"),
    Species("HO2", 58.306, "HO2; Hydroperoxyl radical"),
    Species("HOBr", 59.529, "HOBr; Hypobromous acid"),
    Species("HOCl", 90.397, "HOCl; Hypochlorous acid"),
    Species("HOI", 35.827, "HOI; Hypoiodous acid"),
    Species("HONIT", 58.760, "2nd gen monoterpene organic nitrate"),
    Species("HPALD1", 73.164, "O=CHC(CH3)=CHCH2OOH; d-4,1-C5-hydroperoxyaldehyde"),
    Species("HPALD1OO", 34.759, "peroxy radicals from HPALD1"),
    Species("HPALD2", 1.0291, "HOOCH2C(CH3)=CHCH=O; d-1,4-C5-hydroperoxyaldehyde"),
    Species("HPALD2OO", 28.332, "peroxy radicals from HPALD2"),
    Species("HPALD3", 91.404, "O=CHC(CH3)OOHCH=CH2; b-2,1-C5-hydroperoxyaldehyde"),
    Species("HPALD4", 14.949, "CH2=C(CH3)CHOOHCH=O; b-3,4-C5-hydroperoxyaldehyde"),
    Species("HPETHNL", 90.330, "CHOCH2OOH; hydroperoxyethanal"),
    Species("I", 85.092, "I; Atmoic iodine"),
    Species("I2", 49.639, "I2; Molecular iodine"),
    Species("I2O2", 70.687, "I2O2; Diiodine dioxide"),
    Species("I2O3", 85.950, "I2O3; Diiodine trioxide"),
    Species("I2O4", 36.304, "I2O4; Diiodine tetraoxide"),
    Species("IBr", 46.529, "IBr; Iodine monobromide"),
    Species("ICHE", 17.739, "C5H8O3; Isoprene hydroxy-carbonyl-epoxides"),
    Species("ICHOO", 75.448, "peroxy radical from IEPOXD"),
    Species("ICl", 32.124, "ICl; Iodine monochloride"),
    Species("ICN", 22.128, "C5H7NO4; Lumped isoprene carbonyl nitrates"),
    Species("ICNOO", 12.649, "peroxy radicals from ICN"),
    Species("ICPDH", 71.736, "C5H10O5; Isoprene dihydroxy hydroperoxycarbonyl"),
    Species("IDC", 28.840, "C5H6O2; Lumped isoprene dicarbonyls"),
    Species("IDCHP", 2.3035, "C5H8O5; Isoprene dicarbonyl hydroxy dihydroperoxide"),
    Species("IDHDP", 21.649, "C5H12O6; Isoprene dihydroxy dihydroperoxide"),
    Species("IDHNBOO", 25.086, "peroxy radicals from INPB"),
    Species("IDHNDOO1", 15.276, "peroxy radicals from INPD"),
    Species("IDHNDOO2", 61.961, "peroxy radicals from INPD"),
    Species("IDHPE", 94.216, "C5H10O5; Isoprene dihydroxy hydroperoxy epoxide"),
    Species("IDN", 13.328, "C5H8N2O6; Lumped isoprene dinitrates"),
    Species("IDNOO", 44.188, "peroxy radicals from IDN"),
    Species("IEPOXA", 60.554, "C5H10O3; trans-Beta isoprene epoxydiol"),
    Species("IEPOXAOO", 27.948, "peroxy radical from trans-Beta isoprene epoxydiol"),
    Species("IEPOXB", 38.609, "C5H10O3; cis-Beta isoprene epoxydiol"),
    Species("IEPOXBOO", 87.094, "peroxy radical from cis-Beta isoprene epoxydiol"),
    Species("IEPOXD", 8.0346, "C5H10O3; Delta isoprene epoxydiol"),
    Species("IHN1", 11.028, "C5H9NO4; Isoprene-d-4-hydroxy-1-nitrate"),
    Species("IHN2", 71.286, "C5H9NO4; Isoprene-b-1-hydroxy-2-nitrate"),
    Species("IHN3", 82.443, "C5H9NO4; Isoprene-b-4-hydroxy-3-nitrate"),
    Species("IHN4", 91.975, "C5H9NO4; Isoprene-d-1-hydroxy-4-nitrate"),
    Species("IHOO1", 27.517, "peroxy radical from OH addition to isoprene at C1"),
    Species("IHOO4", 51.624, "peroxy radical from OH addition to isoprene at C4"),
    Species("IHPNBOO", 66.363, "peroxy radicals from INPB"),
    Species("IHPNDOO", 63.447, "peroxy radicals from INPD"),
    Species("IHPOO1", 79.476, "peroxy radical from ISOPOOH"),
    Species("IHPOO2", 58.328, "peroxy radical from ISOPOOH"),
    Species("IHPOO3", 5.9515, "peroxy radical from ISOPOOH"),
    Species("INA", 26.490, "alkoxy radical from INO2D"),
    Species("INDIOL", 52.424, "Generic aerosol phase organonitrate hydrolysis product"),
    Species("INO", 73.106, "INO; Nitrosyl iodide"),
    Species("INO2B", 25.723, "beta-peroxy radicals from isoprene + NO3"),
    Species("INO2D", 30.524, "delta-peroxy radicals from isoprene + NO3"),
    Species("INPB", 96.224, "C5H9NO5; Lumped isoprene beta-hydroperoxy nitrates"),
    Species("INPD", 80.193, "C5H9NO5; Lumped isoprene delta-hydroperoxy nitrates"),
    Species("IO", 26.615, "IO; Iodine monoxide"),
    Species("IONITA", 25.539, "Aerosol-phase organic nitrate from isoprene precursors"),
    Species("IONO", 56.756, "IONO; Nitryl iodide"),
    Species("IONO2", 53.992, "IONO2; Iodine nitrate"),
    Species("IPRNO3", 22.638, "C3H8ONO2; Isopropyl nitrate"),
    Species("ISALA", 79.006, "I; Fine sea salt iodine"),
    Species("ISALC", 13.184, "I; Coarse sea salt iodine"),
    Species("ISOP", 83.240, "CH2=C(CH3)CH=CH2; Isoprene"),
    Species("ISOPNOO1", 60.043, "peroxy radicals from IHN2"),
    Species("ISOPNOO2", 71.160, "peroxy radicals from IHN3"),
    Species("ITCN", 26.206, "C5H9NO7; Lumped tetrafunctional isoprene carbonyl-nitrates"),
    Species("ITHN", 11.572, "C5H11NO7; Lumped tetrafunctional isoprene hydroxynitrates"),
    Species("KO2", 84.868, "RO2 from >3 ketones"),
    Species("LBRO2H", 61.633, "Dummy spc to track oxidation of BRO2 by HO2"),
    Species("LBRO2N", 11.255, "Dummy spc to track oxidation of BRO2 by NO"),
    Species("LIMO", 53.446, "C10H16; Limonene"),
    Species("LIMO2", 92.794, "RO2 from LIMO"),
    Species("LISOPOH", 92.199, "Dummy spc to track oxidation of ISOP by OH"),
    Species("LISOPNO3", 29.918, "Dummy spc to track oxidation of ISOP by NO3"),
    Species("LNRO2H", 29.939, "Dummy spc to track oxidation of NRO2 by HO2"),
    Species("LNRO2N", 57.661, "Dummy spc to track oxidation of NRO2 by NO"),
    Species("LTRO2H", 46.441, "Dummy spc to track oxidation of TRO2 by HO2"),
    Species("LTRO2N", 28.826, "Dummy spc to track oxidation of TRO2 by NO"),
    Species("LVOC", 47.079, "C5H14O5; Gas-phase low-volatility non-IEPOX product of ISOPOOH (RIP) oxidation"),  # noqa: E501
    Species("LVOCOA", 97.788, "C5H14O5; Aerosol-phase low-volatility non-IEPOX product of ISOPOOH (RIP) oxidation"),  # noqa: E501
    Species("LXRO2H", 62.462, "Dummy spc to track oxidation of XRO2 by HO2"),
    Species("LXRO2N", 39.337, "Dummy spc to track oxidation of XRO2 by NO"),
    Species("MACR", 17.935, "CH2=C(CH3)CHO; Methacrolein"),
    Species("MACR1OO", 91.114, "peroxyacyl radical from MACR + OH"),
    Species("MACR1OOH", 61.547, "CH2=C(CH3)C(O)OOH; Peracid from MACR"),
    Species("MACRNO2", 97.585, "Product of MCRHN + OH"),
    Species("MAP", 61.421, "CH3C(O)OOH; Peroxyacetic acid"),
    Species("MCO3", 0.6220, "CH3C(O)OO; Peroxyacetyl radical"),
    Species("MCRDH", 23.756, "C4H8O3; Dihydroxy-MACR"),
    Species("MCRENOL", 43.151, "C4H6O2; Lumped enols from MVK/MACR"),
    Species("MCRHN", 5.5067, "HOCH2C(ONO2)(CH3)CHO; Hydroxynitrate from MACR"),
    Species("MCRHNB", 2.8277, "O2NOCH2C(OH)(CH3)CHO; Hydroxynitrate from MACR"),
    Species("MCRHP", 0.2048, "HOCH2C(OOH)(CH3)CHO; Hydroxy-hydroperoxy-MACR"),
    Species("MCROHOO", 49.422, "peroxy radical from MACR + OH"),
    Species("MCT", 77.753, "methylcatechols"),
    Species("MEK", 61.732, "RC(O)R; Methyl ethyl ketone"),
    Species("MENO3", 89.773, "CH3ONO2; methyl nitrate"),
    Species("MGLY", 93.209, "CH3COCHO; Methylglyoxal"),
    Species("MO2", 73.881, "CH3O2; Methylperoxy radical"),
    Species("MOH", 55.585, "CH3OH; Methanol"),
    Species("MONITA", 61.052, "Aerosol-phase organic nitrate from monoterpene precursors"),
    Species("MONITS", 71.179, "Saturated 1st gen monoterpene organic nitrate"),
    Species("MONITU", 23.294, "Unsaturated 1st gen monoterpene organic nitrate"),
    Species("MP", 25.386, "CH3OOH; Methylhydroperoxide"),
    Species("MPAN", 89.575, "CH2=C(CH3)C(O)OONO2; Peroxymethacroyl nitrate (PMN)"),
    Species("MPN", 59.399, "CH3O2NO2; Methyl peroxy nitrate"),
    Species("MSA", 82.711, "CH4SO3; Methanesulfonic acid"),
    Species("MTPA", 25.413, "Lumped monoterpenes: a-pinene, b-pinene, sabinene, carene"),
    Species("MTPO", 8.9141, "Other monoterpenes: Terpinene, terpinolene, myrcene, ocimene, other monoterpenes"),  # noqa: E501
    Species("MVK", 62.109, "CH2=CHC(=O)CH3; Methyl vinyl ketone"),
    Species("MVKDH", 97.635, "HOCH2CH2OHC(O)CH3; Dihydroxy-MVK"),
    Species("MVKHC", 98.159, "C4H6O3; MVK hydroxy-carbonyl"),
    Species("MVKHCB", 50.621, "C4H6O3; MVK hydroxy-carbonyl"),
    Species("MVKHP", 35.334, "C4H8O4; MVK hydroxy-hydroperoxide"),
    Species("MVKN", 48.570, "HOCH2CH(ONO2)C(=O)CH3; Hydroxynitrate from MVK"),
    Species("MVKOHOO", 41.490, "peroxy radical from MVK + OH"),
    Species("MVKPC", 8.2590, "OCHCH(OOH)C(O)CH3; MVK hydroperoxy-carbonyl"),
    Species("N", 56.891, "N; Atomic nitrogen"),
    Species("N2O", 50.751, "N2O; Nitrous oxide"),
    Species("N2O5", 19.118, "N2O5; Dinitrogen pentoxide"),
    Species("NAP", 33.270, "C10H8; Naphthalene; IVOC surrogate"),
    Species("NIT", 77.088, "NIT; Fine mode inorganic nitrate"),
    Species("NITs", 56.341, "NITs; Coarse mode inorganic nitrate"),
    Species("NO", 54.454, "NO; Nitric oxide"),
    Species("NO2", 5.5605, "NO2; Nitrogen dioxide"),
    Species("NO3", 31.739, "NO3; Nitrate radical"),
    Species("NPHEN", 87.002, "nitrophenols"),
    Species("NPRNO3", 58.488, "C3H8ONO2; n-propyl nitrate"),
    Species("NRO2", 83.618, "Peroxy radical from NAP oxidation"),
    Species("O", 14.164, "O(3P); Ground state atomic oxygen"),
    Species("O1D", 17.648, "O(1D); Excited atomic oxygen"),
    Species("O3", 2.1326, "O3; Ozone"),
    Species("O3A", 28.223, "O3; Ozone in accum seasalt"),
    Species("O3C", 49.728, "O3; Ozone in coarse seasalt"),
    Species("OClO", 60.037, "OClO; Chlorine dioxide"),
    Species("OCS", 20.867, "COS; Carbonyl sulfide"),
    Species("OH", 19.293, "OH; Hydroxyl radical"),
    Species("OIO", 51.406, "OIO; Iodine dioxide"),
    Species("OLND", 63.247, "Monoterpene-derived NO3-alkene adduct"),
    Species("OLNN", 95.667, "Monoterpene-derived NO3 adduct"),
    Species("OTHRO2", 74.722, "Other C2 RO2 not from C2H6 oxidation"),
    Species("PAN", 59.945, "CH3C(O)OONO2; Peroxyacetylnitrate"),
    Species("PHEN", 59.463, "phenol"),
    Species("PIO2", 94.953, "RO2 from MTPA"),
    Species("PIP", 96.809, "Peroxides from MTPA"),
    Species("PO2", 25.827, "HOCH2CH(OO)CH3; RO2 from propene"),
    Species("PP", 61.804, "HOCH2CH(OOH)CH3; Peroxide from PO2"),
    Species("PPN", 94.436, "CH3CH2C(O)OONO2; Peroxypropionylnitrate"),
    Species("PRN1", 87.618, "O2NOCH2CH(OO)CH3; RO2 from propene + NO3"),
    Species("PROPNN", 33.842, "CH3C(=O)CH2ONO2; Propanone nitrate"),
    Species("PRPE", 63.131, "C3H6; >= C3 alkenes"),
    Species("PRPN", 43.083, "O2NOCH2CH(OOH)CH3; Peroxide from PRN1"),
    Species("PYAC", 79.104, "CH3COCOOH; Pyruvic acid"),
    Species("R4N1", 37.438, "RO2 from R4N2"),
    Species("R4N2", 46.153, "RO2NO; >= C4 alkylnitrates"),
    Species("R4O2", 36.162, "RO2 from ALK4"),
    Species("R4P", 40.804, "CH3CH2CH2CH2OOH; Peroxide from R4O2"),
    Species("RA3P", 57.025, "CH3CH2CH2OOH; Peroxide from A3O2"),
    Species("RB3P", 72.421, "CH3CH(OOH)CH3; Peroxide from B3O2"),
    Species("RCHO", 37.680, "CH3CH2CHO; >= C3 aldehydes"),
    Species("RCO3", 63.108, "CH3CH2C(O)OO; Peroxypropionyl radical"),
    Species("RIPA", 42.881, "HOCH2C(OOH)(CH3)CH=CH2; 1,2-ISOPOOH"),
    Species("RIPB", 24.737, "HOCH2C(OOH)(CH3)CH=CH2; 4,3-ISOPOOH"),
    Species("RIPC", 57.374, "C5H10O3; d(1,4)-ISOPOOH"),
    Species("RIPD", 5.9941, "C5H10O3; d(4,1)-ISOPOOH"),
    Species("ROH", 67.750, "C3H7OH; > C2 alcohols"),
    Species("RP", 38.598, "CH3CH2C(O)OOH; Peroxide from RCO3"),
    Species("SALAAL", 37.928, "Accumulation mode seasalt aerosol alkalinity"),
    Species("SALCAL", 13.651, "Coarse mode seasalt aerosol alkalinity"),
    Species("SALACL", 41.613, "Cl; Fine chloride"),
    Species("SALCCL", 41.813, "Cl; Coarse chloride"),
    Species("SALASO2", 46.971, "SO2; Fine seasalt"),
    Species("SALCSO2", 98.028, "SO2; Coarse seasalt"),
    Species("SALASO3", 18.107, "SO3--; Fine seasalt"),
    Species("SALCSO3", 51.008, "SO3--; Coarse chloride"),
    Species("SO2", 6.2180, "SO2; Sulfur dioxide"),
    Species("SO4", 97.494, "SO4; Sulfate"),
    Species("SO4s", 74.244, "SO4 on sea-salt; Sulfate"),
    Species("SOAGX", 82.469, "CHOCHO; Aerosol-phase glyoxal"),
    Species("SOAIE", 81.289, "C5H10O3; Aerosol-phase IEPOX"),
    Species("TOLU", 58.265, "C7H8; Toluene"),
    Species("TRO2", 10.659, "Peroxy radical from TOLU oxidation"),
    Species("XYLE", 24.563, "C8H10; Xylene"),
    Species("XRO2", 25.058, "Peroxy radical from XYLE oxidation"),
    Species("H2", 97.924, "H2; Molecular hydrogen"),
    Species("N2", 36.998, "N2; Molecular nitrogen"),
    Species("O2", 51.201, "O2; Molecular oxygen"),
    Species("RCOOH", 12.892, "C2H5C(O)OH; > C2 organic acids"),
)

#: Default mixing ratios by species name, [:math:`ppb`]
DEFAULT_PPB: dict[str, float] = {s.name: s.default for s in SPECIES}
