# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# proof system selector (first 4 bytes of every groth16 proof blob)
GROTH16_SELECTOR = bytes.fromhex("a4594c59")

# public values encoding tag
PUBLIC_VALUES_ENCODING = "abi.encode(PublicValues(bytes,bytes,bytes))/v1"

# proof layout
SELECTOR_LENGTH = 4
WORD_LENGTH = 32
PROOF_WORDS = 8
MIN_PROOF_LENGTH = SELECTOR_LENGTH + PROOF_WORDS * WORD_LENGTH

# digest mask keeps the value below 2^253
DIGEST_MASK = 0x1F

# verifying key of the compiled signature circuit, from Groth16Verifier.sol
SP1_GROTH16_VK = {
    "selector": GROTH16_SELECTOR.hex(),
    "alpha": [
        "20491192805390485299153009773594534940189261866228447918068658471970481763042",
        "9383485363053290200918347156157836566562967994039712273449902621266178545958",
    ],
    "betaNeg": [
        [
            "6375614351688725206403948262868962793625744043794305715222011528459656738731",
            "4252822878758300859123897981450591353533073413197771768651442665752259397132",
        ],
        [
            "11383000245469012944693504663162918391286475477077232690815866754273895001727",
            "41207766310529818958173054109690360505148424997958324311878202295167071904",
        ],
    ],
    "gammaNeg": [
        [
            "10857046999023057135944570762232829481370756359578518086990519993285655852781",
            "11559732032986387107991004021392285783925812861821192530917403151452391805634",
        ],
        [
            "13392588948715843804641432497768002650278120570034223513918757245338268106653",
            "17805874995975841540914202342111839520379459829704422454583296818431106115052",
        ],
    ],
    "deltaNeg": [
        [
            "1807939758600928081661535078044266309701426477869595321608690071623627252461",
            "13017767206419180294867239590191240882490168779777616723978810680471506089190",
        ],
        [
            "11385252965472363874004017020523979267854101512663014352368174256411716100034",
            "707821308472421780425082520239282952693670279239989952629124761519869475067",
        ],
    ],
    "constant": [
        "17203997695518370725253383800612862082040222186834248316724952811913305748878",
        "282619892079818506885924724237935832196325815176482254129420869757043108110",
    ],
    "publicBasis": [
        [
            "2763789253671512309630211343474627955637016507408470052385640371173442321228",
            "7070003421332099028511324531870215047017050364545890942981741487547942466073",
        ],
        [
            "2223923876691923064813371578678400285087400227347901303400514986210692294428",
            "3228708299174762375496115493137156328822199374794870011715145604387710550517",
        ],
    ],
}
