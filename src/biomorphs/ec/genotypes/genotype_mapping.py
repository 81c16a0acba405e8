from biomorphs.ec.genotypes.biomorph.biomorph_genome import BiomorphGenome

GENOTYPES_MAPPING = {
    'biomorph': BiomorphGenome,
}
