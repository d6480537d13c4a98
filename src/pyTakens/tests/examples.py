#! /usr/bin/env python3

import pyTakens as Takens

#------------------------------------------------------------
#------------------------------------------------------------
def main():
    '''pyTakens examples.'''

    lorenz = Takens.sampleData[ "Lorenz" ]

    # Delay from the first autocorrelation minimum
    D = Takens.estimate_delay( lorenz, verbose = True, returnObject = True )
    Takens.plot_autocorrelation( D )

    # Embed with estimated dimension and delay
    E = Takens.embed_auto( lorenz, delay = D.delay, returnObject = True )
    Takens.plot_embedding( E )

    # Check explicit parameters before embedding
    check = Takens.validate_parameters( lorenz, 3, D.delay )
    if not check :
        print( check.message )

    # Correlation dimension of the first 600 vectors, pairs counted in parallel
    C = Takens.correlation_dimension( E.vectors[:600], maxRadius = 10.0,
                                      numRadii = 20,
                                      executionMode = Takens.ExecutionMode.MULTIPROCESS,
                                      numProcess = 4, verbose = True,
                                      returnObject = True )
    Takens.plot_correlation_sum( C )

    # Same estimate for phase randomized surrogates
    surrogates = Takens.SurrogateData( lorenz, method = 'ebisuzaki',
                                       numSurrogates = 5, seed = 0 )
    for s in range( surrogates.shape[1] ) :
        vectors = Takens.embed( surrogates[:, s], E.embeddingDimension, E.delay )
        print( f'surrogate {s} : correlation dimension ' +
               f'{Takens.correlation_dimension( vectors[:600], maxRadius = 10.0 ):.3f}' )

    # Tent map : one dimensional map
    tent = Takens.embed( Takens.sampleData[ "TentMap" ], 2, 1 )
    print( f'TentMap correlation dimension {Takens.correlation_dimension( tent, 0.5 ):.3f}' )

#------------------------------------------------------------
#------------------------------------------------------------
if __name__ == '__main__':
    main()
