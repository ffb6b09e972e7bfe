"""
Static text shown by the Streamlit page: section prose and references.
"""

TITLE = "IIT and the Brain: Neurobiological Applications"

INTRO = (
    "The Information Integration Theory (IIT) provides a principled framework for explaining why "
    "consciousness is associated with certain brain structures and states over others. This section "
    "explores several key neurobiological applications of the theory, demonstrating how the concept of "
    "integrated information (Φ) can be applied to real-world observations."
)

ARCHITECTURE_HEADER = "1. Thalamocortical System vs. The Cerebellum"
ARCHITECTURE_TEXT = (
    "A central puzzle in neuroscience is why the thalamocortical system is essential for consciousness, "
    "while the cerebellum, which contains far more neurons, contributes minimally. IIT proposes that the "
    "answer lies in their fundamentally different architectures (Tononi 2004)."
)
ARCHITECTURE_BULLETS = [
    "**Thalamocortical System:** Characterized by a mix of functional specialization and widespread "
    "integration. This architecture allows for the formation of a single, large 'main complex' capable "
    "of integrating vast amounts of information, resulting in a **high Φ value**.",
    "**Cerebellum:** Organized into highly parallel, independent modules. This structure is efficient "
    "for coordinating automated tasks but prevents global information integration. It results in many "
    "small, isolated complexes, each with a **low Φ value**.",
]
THALAMOCORTICAL_TITLE = "Thalamocortical-like (High Φ)"
CEREBELLUM_TITLE = "Cerebellum-like (Low Φ)"

DYNAMIC_CORE_HEADER = "2. The Dynamic Core: What's In and What's Out?"
DYNAMIC_CORE_TEXT = (
    "IIT predicts that not all active neurons contribute to conscious experience. Consciousness is a "
    "property of the 'main complex', a 'dynamic core' of high Φ. Other neural circuits, though crucial "
    "for brain function, can be informationally insulated from this core, acting as inputs, outputs, or "
    "automated loops (Tononi and Edelman 1998)."
)
DYNAMIC_CORE_FOOTER = (
    "These external systems provide input and receive output but do not share in the integrated "
    "information of the core itself. Their causal link to the complex is limited to narrow 'ports-in' "
    "and 'ports-out.'"
)

SPLIT_BRAIN_HEADER = "3. Splitting Consciousness"
SPLIT_BRAIN_TEXT = (
    "Studies of 'split-brain' patients, whose corpus callosum connecting the two hemispheres was severed, "
    "show that consciousness itself can be divided (Sperry 1984). IIT explains this by modeling how "
    "cutting these connections fractures a single large complex into two smaller, independent ones, each "
    "supporting a private conscious experience."
)
SPLIT_TOGGLE_LABEL = "Sever Corpus Callosum"

# Chicago style
REFERENCES = [
    "Sperry, Roger. 1984. “Consciousness, Personal Identity and the Divided Brain.” *Neuropsychologia* "
    "22 (6): 661–73. https://doi.org/10.1016/0028-3932(84)90093-9.",
    "Tononi, Giulio. 2004. “An Information Integration Theory of Consciousness.” *BMC Neuroscience* "
    "5 (1): 42. https://doi.org/10.1186/1471-2202-5-42.",
    "Tononi, Giulio, and Gerald M. Edelman. 1998. “Consciousness and Complexity.” *Science* 282 (5395): "
    "1846–51. https://doi.org/10.1126/science.282.5395.1846.",
]
